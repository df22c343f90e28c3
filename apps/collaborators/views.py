"""
Collaborator API views.
"""
from drf_spectacular.utils import extend_schema, extend_schema_view

from apps.authz.types import ResourceKind
from apps.collaborators.serializers import (
    CollaboratorSerializer, CollaboratorCreateSerializer, CollaboratorUpdateSerializer,
)
from apps.core.scoped_views import ScopedDetailView, ScopedListCreateView


class CollaboratorViewMixin:
    kind = ResourceKind.COLLABORATOR
    serializer_class = CollaboratorSerializer
    create_serializer_class = CollaboratorCreateSerializer
    update_serializer_class = CollaboratorUpdateSerializer
    audit_target = 'Collaborator'

    def filter_queryset(self, request, queryset):
        search = request.query_params.get('search')
        if search:
            queryset = queryset.filter(name__icontains=search)
        department = request.query_params.get('department')
        if department:
            queryset = queryset.filter(department=department)
        return queryset


@extend_schema_view(
    get=extend_schema(summary="List collaborators", tags=['Collaborators']),
    post=extend_schema(
        summary="Create collaborator",
        description="Super-admins must pass entrepreneur_id.",
        request=CollaboratorCreateSerializer,
        responses={201: CollaboratorSerializer},
        tags=['Collaborators'],
    ),
)
class CollaboratorListView(CollaboratorViewMixin, ScopedListCreateView):
    """
    GET /v1/collaborators - List collaborators
    POST /v1/collaborators - Create collaborator
    """


@extend_schema_view(
    get=extend_schema(summary="Get collaborator", tags=['Collaborators']),
    put=extend_schema(
        summary="Update collaborator",
        request=CollaboratorUpdateSerializer,
        responses={200: CollaboratorSerializer},
        tags=['Collaborators'],
    ),
    patch=extend_schema(
        summary="Partially update collaborator",
        request=CollaboratorUpdateSerializer,
        responses={200: CollaboratorSerializer},
        tags=['Collaborators'],
    ),
    delete=extend_schema(summary="Delete collaborator", tags=['Collaborators']),
)
class CollaboratorDetailView(CollaboratorViewMixin, ScopedDetailView):
    """
    GET/PUT/PATCH/DELETE /v1/collaborators/{id}
    """
