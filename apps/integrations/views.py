"""
Payment gateway API views.
"""
import logging
from drf_spectacular.utils import extend_schema, extend_schema_view

from apps.authz.types import ResourceKind
from apps.core.scoped_views import ScopedDetailView, ScopedListCreateView
from apps.integrations.serializers import (
    PaymentGatewaySerializer, PaymentGatewayCreateSerializer,
    PaymentGatewayUpdateSerializer,
)

logger = logging.getLogger(__name__)


class PaymentGatewayViewMixin:
    kind = ResourceKind.PAYMENT_GATEWAY
    serializer_class = PaymentGatewaySerializer
    create_serializer_class = PaymentGatewayCreateSerializer
    update_serializer_class = PaymentGatewayUpdateSerializer
    audit_target = 'PaymentGateway'

    def filter_queryset(self, request, queryset):
        gateway_type = request.query_params.get('type')
        if gateway_type:
            queryset = queryset.filter(type=gateway_type)
        return queryset


@extend_schema_view(
    get=extend_schema(
        summary="List payment gateways",
        description="Gateways of the caller's tenant. Super-admins see every tenant.",
        tags=['Payment Gateways'],
    ),
    post=extend_schema(
        summary="Create payment gateway",
        description=(
            "Create a gateway for the caller's tenant. Super-admins must pass "
            "entrepreneur_id. Credentials are encrypted and never returned."
        ),
        request=PaymentGatewayCreateSerializer,
        responses={201: PaymentGatewaySerializer},
        tags=['Payment Gateways'],
    ),
)
class PaymentGatewayListView(PaymentGatewayViewMixin, ScopedListCreateView):
    """
    GET /v1/payment-gateways - List gateways
    POST /v1/payment-gateways - Create gateway
    """


@extend_schema_view(
    get=extend_schema(summary="Get payment gateway", tags=['Payment Gateways']),
    put=extend_schema(
        summary="Update payment gateway",
        request=PaymentGatewayUpdateSerializer,
        responses={200: PaymentGatewaySerializer},
        tags=['Payment Gateways'],
    ),
    patch=extend_schema(
        summary="Partially update payment gateway",
        request=PaymentGatewayUpdateSerializer,
        responses={200: PaymentGatewaySerializer},
        tags=['Payment Gateways'],
    ),
    delete=extend_schema(summary="Delete payment gateway", tags=['Payment Gateways']),
)
class PaymentGatewayDetailView(PaymentGatewayViewMixin, ScopedDetailView):
    """
    GET /v1/payment-gateways/{id}
    PUT/PATCH /v1/payment-gateways/{id}
    DELETE /v1/payment-gateways/{id}
    """
