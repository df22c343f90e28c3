"""
Django admin configuration for integrations app.
"""
from django.contrib import admin

from apps.core.admin import TenantOwnedAdmin
from .models import PaymentGateway


@admin.register(PaymentGateway)
class PaymentGatewayAdmin(TenantOwnedAdmin):
    list_display = ['name', 'type', 'entrepreneur', 'is_active', 'created_at']
    list_filter = ['type', 'is_active']
    search_fields = ['name', 'email']
    # Secrets are only written through the API
    exclude = ['token', 'public_key']
