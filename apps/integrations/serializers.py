"""
Serializers for payment gateway endpoints.

Credentials are write-only; responses carry a masked hint instead.
"""
from rest_framework import serializers

from apps.core.encryption import mask_secret
from apps.integrations.models import PaymentGateway


class PaymentGatewaySerializer(serializers.ModelSerializer):
    """Serializer for PaymentGateway responses."""

    entrepreneur_id = serializers.UUIDField(read_only=True)
    created_by_id = serializers.UUIDField(read_only=True)
    has_token = serializers.SerializerMethodField()
    token_hint = serializers.SerializerMethodField()
    public_key_hint = serializers.SerializerMethodField()

    class Meta:
        model = PaymentGateway
        fields = [
            'id', 'entrepreneur_id', 'created_by_id', 'name', 'type', 'api_url',
            'email', 'is_active', 'has_token', 'token_hint', 'public_key_hint',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_has_token(self, obj) -> bool:
        return bool(obj.token)

    def get_token_hint(self, obj) -> str:
        return mask_secret(obj.token or '')

    def get_public_key_hint(self, obj) -> str:
        return mask_secret(obj.public_key or '')


class PaymentGatewayCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating PaymentGateway."""

    entrepreneur_id = serializers.UUIDField(
        required=False,
        allow_null=True,
        help_text="Owning entrepreneur. Required for super-admins, ignored otherwise."
    )
    token = serializers.CharField(write_only=True, trim_whitespace=True)
    public_key = serializers.CharField(write_only=True, max_length=1000, trim_whitespace=True)

    class Meta:
        model = PaymentGateway
        fields = [
            'entrepreneur_id', 'name', 'type', 'api_url', 'public_key',
            'token', 'email', 'is_active'
        ]


class PaymentGatewayUpdateSerializer(serializers.ModelSerializer):
    """Serializer for updating PaymentGateway. Owner cannot be changed."""

    entrepreneur_id = serializers.UUIDField(required=False, allow_null=True)
    token = serializers.CharField(write_only=True, required=False, trim_whitespace=True)
    public_key = serializers.CharField(write_only=True, required=False, max_length=1000, trim_whitespace=True)

    class Meta:
        model = PaymentGateway
        fields = [
            'entrepreneur_id', 'name', 'type', 'api_url', 'public_key',
            'token', 'email', 'is_active'
        ]
