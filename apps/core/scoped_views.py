"""
Base API views for resources protected by the authorization core.

Every handler asks apps.authz for a decision before touching storage and
hands the decision's predicate to ScopedRepository, so a row is only read or
written while it is inside the caller's scope.
"""
import logging

from rest_framework import status
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.authz.facade import authorize
from apps.authz.guard import PINNED_FIELDS
from apps.authz.policy import permits
from apps.authz.types import OWNER_FIELD_ALIASES, SYSTEM_FIELDS, Operation
from apps.core.repositories import ScopedRepository, load_row
from apps.rbac.models import AuditLog

logger = logging.getLogger(__name__)


class StandardResultsSetPagination(PageNumberPagination):
    """Standard pagination for list endpoints."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 100


def validation_error_response(serializer, request=None):
    payload = {
        'error': {
            'code': 'VALIDATION_ERROR',
            'message': 'Invalid request data',
        },
        'details': serializer.errors,
    }
    request_id = getattr(request, 'request_id', None)
    if request_id:
        payload['request_id'] = request_id
    return Response(payload, status=status.HTTP_400_BAD_REQUEST)


class ScopedResourceMixin:
    """
    Shared plumbing for scoped list/detail views.

    Subclasses set:
        kind: ResourceKind of the rows served
        serializer_class: Output serializer
        create_serializer_class: Input serializer for POST
        update_serializer_class: Input serializer for PUT/PATCH
        audit_target: Target type recorded in the audit log
    """

    kind = None
    serializer_class = None
    create_serializer_class = None
    update_serializer_class = None
    audit_target = ''

    @property
    def repository(self):
        return ScopedRepository(self.kind)

    def authorize_or_raise(self, request, operation, candidate_row=None):
        decision = authorize(
            getattr(request, 'identity', None),
            self.kind,
            operation,
            candidate_row=candidate_row,
            load_row=load_row,
        )
        if not decision.allowed:
            decision.raise_for_denial()
        return decision

    def check_operation(self, request, operation):
        """
        Reject callers whose role can never perform operation on this kind.

        Runs before input validation so that an unauthorized caller sees 401
        or 403 rather than field errors.
        """
        identity = getattr(request, 'identity', None)
        if identity is None or not permits(identity.role, self.kind, operation):
            self.authorize_or_raise(request, operation, {})

    def prepare_candidate(self, request, data, operation):
        """Turn validated input into the candidate row. Hook for subclasses."""
        return dict(data)

    def filter_queryset(self, request, queryset):
        return queryset

    def audit(self, request, action, instance, diff=None, metadata=None):
        AuditLog.log_action(
            action=f"{self.kind.value}.{action}",
            user=getattr(request, 'user', None),
            entrepreneur_id=getattr(instance, 'entrepreneur_id', None),
            target_type=self.audit_target,
            target_id=instance.id,
            diff=diff,
            metadata=metadata,
            request=request,
        )


class ScopedListCreateView(ScopedResourceMixin, APIView):
    """
    GET  - list the rows visible to the caller
    POST - create a row owned by the caller's tenant
    """

    def get(self, request):
        decision = self.authorize_or_raise(request, Operation.READ)

        queryset = self.filter_queryset(request, self.repository.list(decision.predicate))

        paginator = StandardResultsSetPagination()
        page = paginator.paginate_queryset(queryset, request, view=self)
        serializer = self.serializer_class(page, many=True)
        return paginator.get_paginated_response(serializer.data)

    def post(self, request):
        self.check_operation(request, Operation.CREATE)

        serializer = self.create_serializer_class(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer, request)

        candidate = self.prepare_candidate(request, serializer.validated_data, Operation.CREATE)
        decision = self.authorize_or_raise(request, Operation.CREATE, candidate)

        instance = self.repository.create(decision.final_row)

        self.audit(request, 'created', instance, metadata={'fields': sorted(candidate)})
        logger.info(
            f"Created {self.kind.value}",
            extra={'row_id': str(instance.id), 'request_id': getattr(request, 'request_id', None)}
        )

        return Response(self.serializer_class(instance).data, status=status.HTTP_201_CREATED)


class ScopedDetailView(ScopedResourceMixin, APIView):
    """
    GET          - retrieve one row
    PUT / PATCH  - update a row inside the caller's scope
    DELETE       - soft delete a row inside the caller's scope
    """

    def get(self, request, pk):
        decision = self.authorize_or_raise(request, Operation.READ, {'id': pk})
        instance = self.repository.get(decision.predicate, pk)
        return Response(self.serializer_class(instance).data)

    def put(self, request, pk):
        return self._update(request, pk, partial=False)

    def patch(self, request, pk):
        return self._update(request, pk, partial=True)

    def _update(self, request, pk, partial):
        self.check_operation(request, Operation.UPDATE)

        serializer = self.update_serializer_class(data=request.data, partial=partial)
        if not serializer.is_valid():
            return validation_error_response(serializer, request)

        candidate = self.prepare_candidate(request, serializer.validated_data, Operation.UPDATE)
        candidate['id'] = pk
        decision = self.authorize_or_raise(request, Operation.UPDATE, candidate)

        skipped = set(OWNER_FIELD_ALIASES) | set(SYSTEM_FIELDS) | set(PINNED_FIELDS)
        changes = {
            name: decision.final_row[name]
            for name in candidate
            if name not in skipped and name in decision.final_row
        }

        instance = self.repository.update(decision.predicate, pk, changes)

        self.audit(request, 'updated', instance, diff={'fields': sorted(changes)})

        return Response(self.serializer_class(instance).data)

    def delete(self, request, pk):
        decision = self.authorize_or_raise(request, Operation.DELETE, {'id': pk})
        self.before_delete(request, decision.final_row)

        self.repository.delete(decision.predicate, pk)

        AuditLog.log_action(
            action=f"{self.kind.value}.deleted",
            user=getattr(request, 'user', None),
            entrepreneur_id=decision.final_row.get('entrepreneur_id'),
            target_type=self.audit_target,
            target_id=decision.final_row['id'],
            request=request,
        )

        return Response(status=status.HTTP_204_NO_CONTENT)

    def before_delete(self, request, row):
        """Hook for subclasses to refuse deleting row."""
