"""
Django admin configuration for collaborators app.
"""
from django.contrib import admin

from apps.core.admin import TenantOwnedAdmin
from .models import Collaborator


@admin.register(Collaborator)
class CollaboratorAdmin(TenantOwnedAdmin):
    list_display = ['name', 'email', 'position', 'entrepreneur', 'is_active']
    list_filter = ['is_active', 'department']
    search_fields = ['name', 'email']
