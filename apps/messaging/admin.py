"""
Django admin configuration for messaging app.
"""
from django.contrib import admin

from apps.core.admin import TenantOwnedAdmin
from .models import WhatsappInstance


@admin.register(WhatsappInstance)
class WhatsappInstanceAdmin(TenantOwnedAdmin):
    list_display = ['name', 'instance_number', 'entrepreneur', 'is_active', 'created_at']
    list_filter = ['is_active']
    search_fields = ['name', 'instance_number']
