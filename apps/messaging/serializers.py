"""
Serializers for WhatsApp instance endpoints.
"""
import re
from rest_framework import serializers

from apps.messaging.models import WhatsappInstance

E164_PATTERN = re.compile(r'^\+[1-9]\d{7,14}$')


class WhatsappInstanceSerializer(serializers.ModelSerializer):
    """Serializer for WhatsappInstance responses."""

    entrepreneur_id = serializers.UUIDField(read_only=True)
    created_by_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = WhatsappInstance
        fields = [
            'id', 'entrepreneur_id', 'created_by_id', 'name', 'instance_number',
            'api_url', 'is_active', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class WhatsappInstanceCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating WhatsappInstance."""

    entrepreneur_id = serializers.UUIDField(
        required=False,
        allow_null=True,
        help_text="Owning entrepreneur. Required for super-admins, ignored otherwise."
    )

    class Meta:
        model = WhatsappInstance
        fields = ['entrepreneur_id', 'name', 'instance_number', 'api_url', 'is_active']
        # Uniqueness is enforced by the database and reported as a conflict
        validators = []
        extra_kwargs = {'instance_number': {'validators': []}}

    def validate_instance_number(self, value):
        number = re.sub(r'[\s\-()]', '', value)
        if not E164_PATTERN.match(number):
            raise serializers.ValidationError("Phone number must be in E.164 format (e.g. +5511999999999)")
        return number


class WhatsappInstanceUpdateSerializer(WhatsappInstanceCreateSerializer):
    """Serializer for updating WhatsappInstance. Owner cannot be changed."""

    entrepreneur_id = serializers.UUIDField(required=False, allow_null=True)
