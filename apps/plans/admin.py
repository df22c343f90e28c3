"""
Django admin configuration for plans app.
"""
from django.contrib import admin

from apps.core.admin import TenantOwnedAdmin
from .models import CustomerPlan


@admin.register(CustomerPlan)
class CustomerPlanAdmin(TenantOwnedAdmin):
    list_display = ['customer', 'price_table', 'plan_type', 'amount', 'pay_status', 'is_active', 'entrepreneur']
    list_filter = ['plan_type', 'pay_status', 'is_active']
    search_fields = ['customer__email', 'pay_hash']
    readonly_fields = ['customer']
