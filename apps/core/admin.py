"""
Django admin configuration for core app.
"""
from django.contrib import admin

admin.site.site_header = "Dashboard Administration"
admin.site.site_title = "Dashboard Admin"
admin.site.index_title = "Welcome to the Dashboard Administration"


class TenantOwnedAdmin(admin.ModelAdmin):
    """
    Admin for rows owned by an entrepreneur.

    The owner and creator are stamped by the API when a row is created and
    never change afterwards, so the admin shows them read-only and cannot
    add rows.
    """
    owner_readonly_fields = ['entrepreneur', 'created_by', 'created_at', 'updated_at']

    def get_readonly_fields(self, request, obj=None):
        extra = [name for name in super().get_readonly_fields(request, obj)
                 if name not in self.owner_readonly_fields]
        return self.owner_readonly_fields + extra

    def has_add_permission(self, request):
        return False
