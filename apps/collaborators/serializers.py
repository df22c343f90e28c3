"""
Serializers for collaborator endpoints.
"""
from rest_framework import serializers

from apps.collaborators.models import Collaborator


class CollaboratorSerializer(serializers.ModelSerializer):
    """Serializer for Collaborator responses."""

    entrepreneur_id = serializers.UUIDField(read_only=True)
    created_by_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Collaborator
        fields = [
            'id', 'entrepreneur_id', 'created_by_id', 'name', 'email', 'position',
            'department', 'phone', 'skills', 'is_active', 'hire_date',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields


class CollaboratorCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating Collaborator."""

    entrepreneur_id = serializers.UUIDField(
        required=False,
        allow_null=True,
        help_text="Owning entrepreneur. Required for super-admins, ignored otherwise."
    )
    skills = serializers.ListField(
        child=serializers.CharField(max_length=100),
        required=False
    )

    class Meta:
        model = Collaborator
        fields = [
            'entrepreneur_id', 'name', 'email', 'position', 'department',
            'phone', 'skills', 'is_active', 'hire_date'
        ]
        validators = []

    def validate_email(self, value):
        return value.strip().lower()


class CollaboratorUpdateSerializer(CollaboratorCreateSerializer):
    """Serializer for updating Collaborator. Owner cannot be changed."""

    entrepreneur_id = serializers.UUIDField(required=False, allow_null=True)
