"""
Serializers for accounting endpoints.
"""
from rest_framework import serializers

from apps.accounting.models import AccountingEntry


class AccountingEntrySerializer(serializers.ModelSerializer):
    """Serializer for AccountingEntry responses."""

    entrepreneur_id = serializers.UUIDField(read_only=True)
    created_by_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = AccountingEntry
        fields = [
            'id', 'entrepreneur_id', 'created_by_id', 'category', 'description',
            'date', 'type', 'amount', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class AccountingEntryCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating AccountingEntry."""

    entrepreneur_id = serializers.UUIDField(
        required=False,
        allow_null=True,
        help_text="Owning entrepreneur. Required for super-admins, ignored otherwise."
    )

    class Meta:
        model = AccountingEntry
        fields = ['entrepreneur_id', 'category', 'description', 'date', 'type', 'amount']


class AccountingEntryUpdateSerializer(AccountingEntryCreateSerializer):
    """Serializer for updating AccountingEntry. Owner cannot be changed."""

    entrepreneur_id = serializers.UUIDField(required=False, allow_null=True)


class AccountingFilterSerializer(serializers.Serializer):
    """Query parameters for the accounting list."""

    type = serializers.ChoiceField(choices=AccountingEntry.TYPE_CHOICES, required=False)
    category = serializers.CharField(required=False, max_length=100)
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)

    def validate(self, data):
        start = data.get('start_date')
        end = data.get('end_date')
        if start and end and start > end:
            raise serializers.ValidationError({'end_date': 'end_date must not be before start_date'})
        return data
