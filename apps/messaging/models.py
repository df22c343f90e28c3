"""
Messaging models: WhatsApp instances connected by entrepreneurs.
"""
from django.db import models

from apps.core.models import BaseModelManager, TenantOwnedModel


class WhatsappInstanceManager(BaseModelManager):
    """Manager for WhatsApp instance queries."""

    def for_entrepreneur(self, entrepreneur_id):
        return self.filter(entrepreneur_id=entrepreneur_id)

    def active(self):
        return self.filter(is_active=True)

    def by_number(self, instance_number):
        return self.filter(instance_number=instance_number).first()


class WhatsappInstance(TenantOwnedModel):
    """
    A WhatsApp number connected through an external API.

    instance_number is unique across all tenants among live rows, since one
    phone number can only be connected once.
    """

    name = models.CharField(max_length=255)
    instance_number = models.CharField(
        max_length=50,
        help_text="Phone number in E.164 format"
    )
    api_url = models.URLField(
        max_length=500,
        help_text="Instance API base URL"
    )
    is_active = models.BooleanField(default=True, db_index=True)

    objects = WhatsappInstanceManager()

    class Meta:
        db_table = 'whatsapp_instances'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(
                fields=['instance_number'],
                condition=models.Q(deleted_at__isnull=True),
                name='unique_live_whatsapp_instance_number',
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.instance_number})"
