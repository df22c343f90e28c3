"""
Django admin configuration for catalog app.
"""
from django.contrib import admin
from .models import PriceTable


@admin.register(PriceTable)
class PriceTableAdmin(admin.ModelAdmin):
    list_display = ['title', 'current_price_3x', 'current_price_12x', 'months', 'is_active', 'display_order']
    list_filter = ['is_active']
    search_fields = ['title', 'subtitle']
    ordering = ['display_order']
