"""
Serializers for authentication and user endpoints.
"""
from rest_framework import serializers
from rest_framework.validators import UniqueValidator
from django.contrib.auth.password_validation import validate_password

from apps.authz.types import Role
from apps.rbac.models import User

ASSIGNABLE_ROLES = [role.value for role in Role.assignable()]


class LoginSerializer(serializers.Serializer):
    """Serializer for login."""

    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )


class UserSerializer(serializers.ModelSerializer):
    """Serializer for User responses. Never exposes the password hash."""

    entrepreneur_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'email', 'name', 'role', 'entrepreneur_id', 'avatar',
            'is_active', 'last_login_at', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class UserProfileSerializer(UserSerializer):
    """Serializer for /auth/me: user plus the resolved tenant."""

    tenant_id = serializers.UUIDField(read_only=True)

    class Meta(UserSerializer.Meta):
        fields = UserSerializer.Meta.fields + ['tenant_id']
        read_only_fields = fields


class UserCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating a User (super-admin only)."""

    password = serializers.CharField(
        write_only=True,
        min_length=8,
        style={'input_type': 'password'},
        validators=[validate_password]
    )
    role = serializers.ChoiceField(choices=ASSIGNABLE_ROLES)
    entrepreneur_id = serializers.UUIDField(
        required=False,
        allow_null=True,
        help_text="Owning entrepreneur. Required for collaborators and customers."
    )

    class Meta:
        model = User
        fields = ['email', 'name', 'password', 'role', 'entrepreneur_id', 'avatar', 'is_active']
        extra_kwargs = {
            'email': {
                'validators': [
                    UniqueValidator(
                        queryset=User.objects.all(),
                        lookup='iexact',
                        message='A user with this email already exists.',
                    )
                ]
            }
        }

    def validate_email(self, value):
        return User.objects.normalize_email(value)


class UserUpdateSerializer(serializers.ModelSerializer):
    """
    Serializer for updating a User.

    role and entrepreneur_id are accepted so that attempts to change them are
    refused explicitly; use POST /users/{id}/role for role changes.
    """

    password = serializers.CharField(
        write_only=True,
        required=False,
        min_length=8,
        style={'input_type': 'password'},
        validators=[validate_password]
    )
    role = serializers.CharField(required=False)
    entrepreneur_id = serializers.UUIDField(required=False, allow_null=True)

    class Meta:
        model = User
        fields = ['email', 'name', 'password', 'role', 'entrepreneur_id', 'avatar']
        # Uniqueness is enforced by the database and reported as a conflict
        extra_kwargs = {'email': {'validators': [], 'required': False}}

    def validate_email(self, value):
        return User.objects.normalize_email(value)


class RoleChangeSerializer(serializers.Serializer):
    """Serializer for role reassignment."""

    role = serializers.ChoiceField(choices=ASSIGNABLE_ROLES)
    entrepreneur_id = serializers.UUIDField(
        required=False,
        allow_null=True,
        help_text="Owner when a super-admin or entrepreneur becomes a collaborator or customer"
    )
