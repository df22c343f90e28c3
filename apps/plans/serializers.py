"""
Serializers for customer plan endpoints.
"""
from decimal import Decimal

from rest_framework import serializers

from apps.catalog.models import PriceTable
from apps.plans.models import CustomerPlan


class CustomerPlanSerializer(serializers.ModelSerializer):
    """Serializer for CustomerPlan responses."""

    entrepreneur_id = serializers.UUIDField(read_only=True)
    created_by_id = serializers.UUIDField(read_only=True)
    customer_id = serializers.UUIDField(read_only=True)
    price_table_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = CustomerPlan
        fields = [
            'id', 'entrepreneur_id', 'created_by_id', 'customer_id', 'price_table_id',
            'plan_type', 'amount', 'pay_hash', 'pay_status', 'pay_date', 'pay_link',
            'pay_expiration', 'plan_expiration_date', 'is_active', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class CustomerPlanCreateSerializer(serializers.ModelSerializer):
    """
    Serializer for creating CustomerPlan.

    amount defaults to the price table's current price for plan_type.
    """

    entrepreneur_id = serializers.UUIDField(
        required=False,
        allow_null=True,
        help_text="Owning entrepreneur. Required for super-admins, ignored otherwise."
    )
    customer_id = serializers.UUIDField(help_text="Customer of the owning entrepreneur")
    price_table_id = serializers.UUIDField()
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0.01'), required=False)

    class Meta:
        model = CustomerPlan
        fields = [
            'entrepreneur_id', 'customer_id', 'price_table_id', 'plan_type', 'amount',
            'pay_hash', 'pay_status', 'pay_date', 'pay_link', 'pay_expiration',
            'plan_expiration_date', 'is_active'
        ]

    def validate_price_table_id(self, value):
        if not PriceTable.objects.filter(pk=value).exists():
            raise serializers.ValidationError('Price table not found')
        return value

    def validate(self, data):
        if 'amount' not in data and not self.partial:
            price_table = PriceTable.objects.get(pk=data['price_table_id'])
            if data.get('plan_type', CustomerPlan.PLAN_3X) == CustomerPlan.PLAN_12X:
                data['amount'] = price_table.current_price_12x
            else:
                data['amount'] = price_table.current_price_3x
        return data


class CustomerPlanUpdateSerializer(CustomerPlanCreateSerializer):
    """Serializer for updating CustomerPlan. Owner and customer cannot be changed."""

    entrepreneur_id = serializers.UUIDField(required=False, allow_null=True)
    customer_id = serializers.UUIDField(required=False)
    price_table_id = serializers.UUIDField(required=False)

    def validate(self, data):
        return data


class CustomerPlanFilterSerializer(serializers.Serializer):
    """Query parameters for the customer plan list."""

    customer_id = serializers.UUIDField(required=False)
    pay_status = serializers.ChoiceField(choices=CustomerPlan.PAY_STATUS_CHOICES, required=False)
    is_active = serializers.BooleanField(required=False, allow_null=True, default=None)
