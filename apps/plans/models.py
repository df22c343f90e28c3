"""
Customer plans: a price table sold by an entrepreneur to one of its customers.
"""
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from apps.core.models import BaseModelManager, TenantOwnedModel


class CustomerPlanManager(BaseModelManager):
    """Manager for customer plans."""

    def for_customer(self, customer_id):
        return self.filter(customer_id=customer_id)

    def active(self):
        return self.filter(is_active=True)


class CustomerPlan(TenantOwnedModel):
    """
    A subscription held by a customer.

    entrepreneur is the seller and customer the buyer; both are fixed at
    creation. The pay_* fields mirror the payment link issued by the
    entrepreneur's gateway.
    """

    PLAN_3X = '3x'
    PLAN_12X = '12x'
    PLAN_TYPE_CHOICES = [
        (PLAN_3X, '3 instalments'),
        (PLAN_12X, '12 instalments'),
    ]

    PAY_PENDING = 'pending'
    PAY_PAID = 'paid'
    PAY_FAILED = 'failed'
    PAY_EXPIRED = 'expired'
    PAY_STATUS_CHOICES = [
        (PAY_PENDING, 'Pending'),
        (PAY_PAID, 'Paid'),
        (PAY_FAILED, 'Failed'),
        (PAY_EXPIRED, 'Expired'),
    ]

    customer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='customer_plans',
        help_text="Customer that bought the plan"
    )
    price_table = models.ForeignKey(
        'catalog.PriceTable',
        on_delete=models.PROTECT,
        related_name='customer_plans',
    )
    plan_type = models.CharField(max_length=3, choices=PLAN_TYPE_CHOICES, default=PLAN_3X)
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))],
    )
    pay_hash = models.CharField(max_length=255, blank=True, help_text="Gateway payment reference")
    pay_status = models.CharField(
        max_length=10,
        choices=PAY_STATUS_CHOICES,
        default=PAY_PENDING,
        db_index=True,
    )
    pay_date = models.DateTimeField(null=True, blank=True)
    pay_link = models.URLField(max_length=500, blank=True)
    pay_expiration = models.DateTimeField(null=True, blank=True)
    plan_expiration_date = models.DateField(null=True, blank=True)
    is_active = models.BooleanField(default=True, db_index=True)

    objects = CustomerPlanManager()

    class Meta:
        db_table = 'customer_plans'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['entrepreneur', 'pay_status'], name='plan_entrepreneur_status_idx'),
            models.Index(fields=['customer', 'is_active'], name='plan_customer_active_idx'),
        ]

    def __str__(self):
        return f"{self.price_table_id} {self.plan_type} for {self.customer_id}"
