"""
Price table API views.
"""
import logging
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, extend_schema_view

from apps.authz.facade import authorize
from apps.authz.identity import Identity
from apps.authz.types import Operation, ResourceKind
from apps.catalog.serializers import (
    PriceTableSerializer, PriceTableCreateSerializer, PriceTableUpdateSerializer,
    PublicPriceTableSerializer,
)
from apps.core.repositories import ScopedRepository
from apps.core.scoped_views import ScopedDetailView, ScopedListCreateView

logger = logging.getLogger(__name__)


class PriceTableViewMixin:
    kind = ResourceKind.PRICE_TABLE
    serializer_class = PriceTableSerializer
    create_serializer_class = PriceTableCreateSerializer
    update_serializer_class = PriceTableUpdateSerializer
    audit_target = 'PriceTable'

    def filter_queryset(self, request, queryset):
        return queryset.order_by('display_order', 'created_at', 'id')


@extend_schema_view(
    get=extend_schema(
        summary="List price tables",
        description="Super-admins see every table; other roles see active tables only.",
        tags=['Price Tables'],
    ),
    post=extend_schema(
        summary="Create price table",
        description="Super-admin only.",
        request=PriceTableCreateSerializer,
        responses={201: PriceTableSerializer},
        tags=['Price Tables'],
    ),
)
class PriceTableListView(PriceTableViewMixin, ScopedListCreateView):
    """
    GET /v1/price-tables - List price tables
    POST /v1/price-tables - Create price table
    """


@extend_schema_view(
    get=extend_schema(summary="Get price table", tags=['Price Tables']),
    put=extend_schema(
        summary="Update price table",
        request=PriceTableUpdateSerializer,
        responses={200: PriceTableSerializer},
        tags=['Price Tables'],
    ),
    patch=extend_schema(
        summary="Partially update price table",
        request=PriceTableUpdateSerializer,
        responses={200: PriceTableSerializer},
        tags=['Price Tables'],
    ),
    delete=extend_schema(summary="Delete price table", tags=['Price Tables']),
)
class PriceTableDetailView(PriceTableViewMixin, ScopedDetailView):
    """
    GET/PUT/PATCH/DELETE /v1/price-tables/{id}
    """


class PublicPriceTableListView(APIView):
    """
    Public pricing page.

    GET /v1/public/price-tables - Active price tables in display order
    """
    authentication_classes = []
    permission_classes = []

    @extend_schema(
        summary="Public price tables",
        description="Active price tables ordered by display order. No authentication required.",
        responses={200: PublicPriceTableSerializer(many=True)},
        tags=['Price Tables'],
        auth=[],
    )
    def get(self, request):
        decision = authorize(Identity.anonymous(), ResourceKind.PRICE_TABLE, Operation.READ)
        if not decision.allowed:
            decision.raise_for_denial()

        queryset = ScopedRepository(ResourceKind.PRICE_TABLE).list(decision.predicate)
        queryset = queryset.order_by('display_order', 'created_at', 'id')

        serializer = PublicPriceTableSerializer(queryset, many=True)
        return Response(serializer.data)
