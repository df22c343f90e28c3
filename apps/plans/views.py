"""
Customer plan API views.

Staff of a tenant see every plan the tenant sold; a customer sees only the
plans it holds.
"""
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.authz.types import Operation, ResourceKind
from apps.core.scoped_views import (
    ScopedDetailView, ScopedListCreateView, validation_error_response,
)
from apps.plans.serializers import (
    CustomerPlanSerializer, CustomerPlanCreateSerializer,
    CustomerPlanUpdateSerializer, CustomerPlanFilterSerializer,
)


class CustomerPlanViewMixin:
    kind = ResourceKind.CUSTOMER_PLAN
    serializer_class = CustomerPlanSerializer
    create_serializer_class = CustomerPlanCreateSerializer
    update_serializer_class = CustomerPlanUpdateSerializer
    audit_target = 'CustomerPlan'


@extend_schema_view(
    get=extend_schema(
        summary="List customer plans",
        parameters=[
            OpenApiParameter('customer_id', OpenApiTypes.UUID, OpenApiParameter.QUERY),
            OpenApiParameter(
                'pay_status', OpenApiTypes.STR, OpenApiParameter.QUERY,
                enum=['pending', 'paid', 'failed', 'expired']
            ),
            OpenApiParameter('is_active', OpenApiTypes.BOOL, OpenApiParameter.QUERY),
        ],
        tags=['Customer Plans'],
    ),
    post=extend_schema(
        summary="Create customer plan",
        description=(
            "customer_id must reference an active customer of the owning "
            "entrepreneur. Super-admins must pass entrepreneur_id."
        ),
        request=CustomerPlanCreateSerializer,
        responses={201: CustomerPlanSerializer},
        tags=['Customer Plans'],
    ),
)
class CustomerPlanListView(CustomerPlanViewMixin, ScopedListCreateView):
    """
    GET /v1/customer-plans - List plans
    POST /v1/customer-plans - Create plan
    """

    def get(self, request):
        self.check_operation(request, Operation.READ)

        filters = CustomerPlanFilterSerializer(data=request.query_params)
        if not filters.is_valid():
            return validation_error_response(filters, request)
        self.filters = filters.validated_data
        return super().get(request)

    def filter_queryset(self, request, queryset):
        params = self.filters
        if params.get('customer_id'):
            queryset = queryset.filter(customer_id=params['customer_id'])
        if params.get('pay_status'):
            queryset = queryset.filter(pay_status=params['pay_status'])
        if params.get('is_active') is not None:
            queryset = queryset.filter(is_active=params['is_active'])
        return queryset


@extend_schema_view(
    get=extend_schema(summary="Get customer plan", tags=['Customer Plans']),
    put=extend_schema(
        summary="Update customer plan",
        request=CustomerPlanUpdateSerializer,
        responses={200: CustomerPlanSerializer},
        tags=['Customer Plans'],
    ),
    patch=extend_schema(
        summary="Partially update customer plan",
        request=CustomerPlanUpdateSerializer,
        responses={200: CustomerPlanSerializer},
        tags=['Customer Plans'],
    ),
    delete=extend_schema(summary="Delete customer plan", tags=['Customer Plans']),
)
class CustomerPlanDetailView(CustomerPlanViewMixin, ScopedDetailView):
    """
    GET/PUT/PATCH/DELETE /v1/customer-plans/{id}
    """
