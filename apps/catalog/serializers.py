"""
Serializers for price table endpoints.
"""
from rest_framework import serializers

from apps.catalog.models import PriceTable

PRICE_TABLE_FIELDS = [
    'title', 'subtitle', 'advantages', 'old_price_3x', 'current_price_3x',
    'old_price_12x', 'current_price_12x', 'months', 'image1', 'image2',
    'buy_link', 'is_active', 'display_order'
]


class PriceTableSerializer(serializers.ModelSerializer):
    """Serializer for PriceTable responses."""

    class Meta:
        model = PriceTable
        fields = ['id'] + PRICE_TABLE_FIELDS + ['created_at', 'updated_at']
        read_only_fields = fields


class PublicPriceTableSerializer(serializers.ModelSerializer):
    """Serializer for the anonymous pricing page."""

    class Meta:
        model = PriceTable
        fields = [
            'id', 'title', 'subtitle', 'advantages', 'old_price_3x', 'current_price_3x',
            'old_price_12x', 'current_price_12x', 'months', 'image1', 'image2',
            'buy_link', 'display_order'
        ]
        read_only_fields = fields


class PriceTableCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating PriceTable."""

    advantages = serializers.ListField(
        child=serializers.CharField(max_length=255),
        required=False
    )

    class Meta:
        model = PriceTable
        fields = PRICE_TABLE_FIELDS

    def validate(self, data):
        """Old prices, when given, must not be below the current ones."""
        for suffix in ('3x', '12x'):
            old = data.get(f'old_price_{suffix}')
            current = data.get(f'current_price_{suffix}')
            if old is not None and current is not None and old < current:
                raise serializers.ValidationError({
                    f'old_price_{suffix}': f'old_price_{suffix} must be greater than or equal to current_price_{suffix}'
                })
        return data


class PriceTableUpdateSerializer(PriceTableCreateSerializer):
    """Serializer for updating PriceTable."""
