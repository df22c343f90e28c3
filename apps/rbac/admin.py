"""
Django admin configuration for RBAC app.
"""
from django.contrib import admin
from .models import User, AuditLog


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """
    Admin for the User model.

    Roles are shown read-only; reassignment goes through the API so that
    tenant membership is re-derived and audited.
    """
    list_display = ['email', 'name', 'role', 'entrepreneur', 'is_active', 'created_at']
    list_filter = ['role', 'is_active', 'created_at']
    search_fields = ['email', 'name']
    ordering = ['-created_at']

    fieldsets = (
        (None, {
            'fields': ('email', 'name', 'avatar')
        }),
        ('Access', {
            'fields': ('role', 'entrepreneur', 'is_active')
        }),
        ('Activity', {
            'fields': ('last_login_at', 'created_at', 'updated_at')
        }),
    )

    readonly_fields = ['role', 'entrepreneur', 'created_at', 'updated_at', 'last_login_at']

    def has_add_permission(self, request):
        return False


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    """Read-only admin for the audit trail."""
    list_display = ['created_at', 'action', 'user', 'entrepreneur', 'target_type', 'target_id']
    list_filter = ['action', 'target_type', 'created_at']
    search_fields = ['action', 'target_type', 'user__email', 'request_id']
    readonly_fields = [
        'action', 'user', 'entrepreneur', 'target_type', 'target_id', 'diff',
        'ip_address', 'user_agent', 'request_id', 'metadata', 'created_at'
    ]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
