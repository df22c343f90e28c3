"""
Django admin configuration for accounting app.
"""
from django.contrib import admin

from apps.core.admin import TenantOwnedAdmin
from .models import AccountingEntry


@admin.register(AccountingEntry)
class AccountingEntryAdmin(TenantOwnedAdmin):
    list_display = ['date', 'type', 'category', 'amount', 'entrepreneur']
    list_filter = ['type', 'category']
    search_fields = ['description', 'category']
    date_hierarchy = 'date'
