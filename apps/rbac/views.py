"""
User management API views.

Users are a self-scoped resource: super-admins see and manage every user,
everyone else only their own row. Role changes go through RoleChangeView.
"""
import logging
import uuid
from django.contrib.auth.hashers import make_password
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, extend_schema_view

from apps.authz.facade import DEPENDENT_HOLDING_ROLES
from apps.authz.types import ResourceKind, Role
from apps.core.exceptions import ConflictError
from apps.core.permissions import HasIdentity
from apps.core.repositories import has_dependents
from apps.core.scoped_views import (
    ScopedDetailView, ScopedListCreateView, validation_error_response,
)
from apps.rbac.serializers import (
    RoleChangeSerializer, UserCreateSerializer, UserSerializer, UserUpdateSerializer,
)
from apps.rbac.services import UserService

logger = logging.getLogger(__name__)


class UserViewMixin:
    kind = ResourceKind.USER
    serializer_class = UserSerializer
    create_serializer_class = UserCreateSerializer
    update_serializer_class = UserUpdateSerializer
    audit_target = 'User'

    def prepare_candidate(self, request, data, operation):
        """Replace the plain password with its hash."""
        candidate = dict(data)
        password = candidate.pop('password', None)
        if password:
            candidate['password_hash'] = make_password(password)
        return candidate

    def filter_queryset(self, request, queryset):
        role = request.query_params.get('role')
        if role:
            queryset = queryset.filter(role=role)
        entrepreneur_id = request.query_params.get('entrepreneur_id')
        if entrepreneur_id:
            try:
                queryset = queryset.filter(entrepreneur_id=uuid.UUID(entrepreneur_id))
            except ValueError:
                queryset = queryset.none()
        return queryset


@extend_schema_view(
    get=extend_schema(
        summary="List users",
        description="Super-admins see all users; other roles see only themselves.",
        tags=['Users'],
    ),
    post=extend_schema(
        summary="Create user",
        description=(
            "Super-admin only. Collaborators and customers need entrepreneur_id "
            "referencing an active entrepreneur; super-admins and entrepreneurs must not have one."
        ),
        request=UserCreateSerializer,
        responses={201: UserSerializer},
        tags=['Users'],
    ),
)
class UserListView(UserViewMixin, ScopedListCreateView):
    """
    GET /v1/users - List users
    POST /v1/users - Create user
    """


@extend_schema_view(
    get=extend_schema(summary="Get user", tags=['Users']),
    put=extend_schema(
        summary="Update user",
        description="Role and entrepreneur cannot be changed here.",
        request=UserUpdateSerializer,
        responses={200: UserSerializer},
        tags=['Users'],
    ),
    patch=extend_schema(
        summary="Partially update user",
        request=UserUpdateSerializer,
        responses={200: UserSerializer},
        tags=['Users'],
    ),
    delete=extend_schema(summary="Delete user", tags=['Users']),
)
class UserDetailView(UserViewMixin, ScopedDetailView):
    """
    GET/PUT/PATCH/DELETE /v1/users/{id}
    """

    def before_delete(self, request, row):
        if Role.coerce(row.get('role')) in DEPENDENT_HOLDING_ROLES and has_dependents(row['id']):
            raise ConflictError('User still owns users or records')


class RoleChangeView(APIView):
    """
    POST /v1/users/{id}/role

    Reassign a user's role. Super-admin only.
    """
    permission_classes = [HasIdentity]

    @extend_schema(
        summary="Change user role",
        description=(
            "Reassign a role and re-derive tenant membership. Promoting to "
            "super-admin or entrepreneur clears entrepreneur_id; demoting an "
            "entrepreneur that still owns users or records, or a customer that still"
            " holds plans, is refused."
        ),
        request=RoleChangeSerializer,
        responses={200: UserSerializer},
        tags=['Users'],
    )
    def post(self, request, pk):
        serializer = RoleChangeSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer, request)

        user = UserService.change_role(
            request.identity,
            pk,
            serializer.validated_data['role'],
            entrepreneur_id=serializer.validated_data.get('entrepreneur_id'),
            actor=request.user,
            request=request,
        )

        return Response(UserSerializer(user).data, status=status.HTTP_200_OK)
