"""
WhatsApp instance API views.
"""
from drf_spectacular.utils import extend_schema, extend_schema_view

from apps.authz.types import ResourceKind
from apps.core.scoped_views import ScopedDetailView, ScopedListCreateView
from apps.messaging.serializers import (
    WhatsappInstanceSerializer, WhatsappInstanceCreateSerializer,
    WhatsappInstanceUpdateSerializer,
)


class WhatsappInstanceViewMixin:
    kind = ResourceKind.WHATSAPP_INSTANCE
    serializer_class = WhatsappInstanceSerializer
    create_serializer_class = WhatsappInstanceCreateSerializer
    update_serializer_class = WhatsappInstanceUpdateSerializer
    audit_target = 'WhatsappInstance'


@extend_schema_view(
    get=extend_schema(summary="List WhatsApp instances", tags=['WhatsApp Instances']),
    post=extend_schema(
        summary="Create WhatsApp instance",
        description="Super-admins must pass entrepreneur_id. Numbers are unique across tenants.",
        request=WhatsappInstanceCreateSerializer,
        responses={201: WhatsappInstanceSerializer},
        tags=['WhatsApp Instances'],
    ),
)
class WhatsappInstanceListView(WhatsappInstanceViewMixin, ScopedListCreateView):
    """
    GET /v1/whatsapp-instances - List instances
    POST /v1/whatsapp-instances - Create instance
    """


@extend_schema_view(
    get=extend_schema(summary="Get WhatsApp instance", tags=['WhatsApp Instances']),
    put=extend_schema(
        summary="Update WhatsApp instance",
        request=WhatsappInstanceUpdateSerializer,
        responses={200: WhatsappInstanceSerializer},
        tags=['WhatsApp Instances'],
    ),
    patch=extend_schema(
        summary="Partially update WhatsApp instance",
        request=WhatsappInstanceUpdateSerializer,
        responses={200: WhatsappInstanceSerializer},
        tags=['WhatsApp Instances'],
    ),
    delete=extend_schema(summary="Delete WhatsApp instance", tags=['WhatsApp Instances']),
)
class WhatsappInstanceDetailView(WhatsappInstanceViewMixin, ScopedDetailView):
    """
    GET/PUT/PATCH/DELETE /v1/whatsapp-instances/{id}
    """
