"""
Integration models for payment providers.

Gateway credentials are encrypted at rest and never returned by the API.
"""
from django.db import models

from apps.core.fields import EncryptedCharField, EncryptedTextField
from apps.core.models import BaseModelManager, TenantOwnedModel


class PaymentGatewayManager(BaseModelManager):
    """Manager for payment gateway queries."""

    def for_entrepreneur(self, entrepreneur_id):
        return self.filter(entrepreneur_id=entrepreneur_id)

    def active(self):
        return self.filter(is_active=True)

    def by_type(self, gateway_type):
        return self.filter(type=gateway_type)


class PaymentGateway(TenantOwnedModel):
    """
    Payment provider account configured by an entrepreneur.

    token and public_key are stored with AES-256-GCM; only isnull lookups
    work on them.
    """

    TYPE_CHOICES = [
        ('asaas', 'Asaas'),
        ('mercado_pago', 'Mercado Pago'),
        ('pagseguro', 'PagSeguro'),
    ]

    name = models.CharField(
        max_length=255,
        help_text="Display name"
    )
    type = models.CharField(
        max_length=50,
        choices=TYPE_CHOICES,
        db_index=True,
        help_text="Payment provider"
    )
    api_url = models.URLField(
        max_length=500,
        help_text="Provider API base URL"
    )
    public_key = EncryptedCharField(
        max_length=1000,
        help_text="Provider public key (encrypted)"
    )
    token = EncryptedTextField(
        help_text="Provider API token (encrypted)"
    )
    email = models.EmailField(
        blank=True,
        help_text="Email registered with the provider"
    )
    is_active = models.BooleanField(
        default=True,
        db_index=True,
        help_text="Whether the gateway accepts payments"
    )

    objects = PaymentGatewayManager()

    class Meta:
        db_table = 'payment_gateways'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['entrepreneur', 'is_active'], name='pg_entrepreneur_active_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.get_type_display()})"
