"""
Accounting API views.
"""
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounting.serializers import (
    AccountingEntrySerializer, AccountingEntryCreateSerializer,
    AccountingEntryUpdateSerializer, AccountingFilterSerializer,
)
from apps.authz.types import Operation, ResourceKind
from apps.core.scoped_views import (
    ScopedDetailView, ScopedListCreateView, validation_error_response,
)


class AccountingViewMixin:
    kind = ResourceKind.ACCOUNTING_ENTRY
    serializer_class = AccountingEntrySerializer
    create_serializer_class = AccountingEntryCreateSerializer
    update_serializer_class = AccountingEntryUpdateSerializer
    audit_target = 'AccountingEntry'


@extend_schema_view(
    get=extend_schema(
        summary="List accounting entries",
        parameters=[
            OpenApiParameter('type', OpenApiTypes.STR, OpenApiParameter.QUERY, enum=['receives', 'expenses']),
            OpenApiParameter('category', OpenApiTypes.STR, OpenApiParameter.QUERY),
            OpenApiParameter('start_date', OpenApiTypes.DATE, OpenApiParameter.QUERY),
            OpenApiParameter('end_date', OpenApiTypes.DATE, OpenApiParameter.QUERY),
        ],
        tags=['Accounting'],
    ),
    post=extend_schema(
        summary="Create accounting entry",
        description="Super-admins must pass entrepreneur_id.",
        request=AccountingEntryCreateSerializer,
        responses={201: AccountingEntrySerializer},
        tags=['Accounting'],
    ),
)
class AccountingListView(AccountingViewMixin, ScopedListCreateView):
    """
    GET /v1/accounting - List entries
    POST /v1/accounting - Create entry
    """

    def get(self, request):
        self.check_operation(request, Operation.READ)

        filters = AccountingFilterSerializer(data=request.query_params)
        if not filters.is_valid():
            return validation_error_response(filters, request)
        self.filters = filters.validated_data
        return super().get(request)

    def filter_queryset(self, request, queryset):
        params = self.filters
        if 'type' in params:
            queryset = queryset.filter(type=params['type'])
        if 'category' in params:
            queryset = queryset.filter(category=params['category'])
        if 'start_date' in params:
            queryset = queryset.filter(date__gte=params['start_date'])
        if 'end_date' in params:
            queryset = queryset.filter(date__lte=params['end_date'])
        return queryset


@extend_schema_view(
    get=extend_schema(summary="Get accounting entry", tags=['Accounting']),
    put=extend_schema(
        summary="Update accounting entry",
        request=AccountingEntryUpdateSerializer,
        responses={200: AccountingEntrySerializer},
        tags=['Accounting'],
    ),
    patch=extend_schema(
        summary="Partially update accounting entry",
        request=AccountingEntryUpdateSerializer,
        responses={200: AccountingEntrySerializer},
        tags=['Accounting'],
    ),
    delete=extend_schema(summary="Delete accounting entry", tags=['Accounting']),
)
class AccountingDetailView(AccountingViewMixin, ScopedDetailView):
    """
    GET/PUT/PATCH/DELETE /v1/accounting/{id}
    """
