"""
Core models for the dashboard API.
Provides BaseModel with UUID primary keys, soft delete, and timestamp fields.
"""
import uuid
from django.conf import settings
from django.db import models
from django.utils import timezone


class BaseModelQuerySet(models.QuerySet):
    """QuerySet with soft delete support."""

    def delete(self):
        """Soft delete all rows in the queryset. Returns the number of rows touched."""
        return self.update(deleted_at=timezone.now(), updated_at=timezone.now())


class BaseModelManager(models.Manager.from_queryset(BaseModelQuerySet)):
    """Manager that hides soft-deleted rows."""

    def get_queryset(self):
        return super().get_queryset().filter(deleted_at__isnull=True)


class BaseModel(models.Model):
    """
    Abstract base model with UUID primary key, soft delete, and timestamps.

    Every dashboard table inherits from it so that ids are opaque and rows
    removed through the API remain available for audit.
    """
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier"
    )

    created_at = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        help_text="Timestamp when the record was created"
    )

    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Timestamp when the record was last updated"
    )

    deleted_at = models.DateTimeField(
        null=True,
        blank=True,
        db_index=True,
        help_text="Timestamp when the record was soft deleted"
    )

    objects = BaseModelManager()
    objects_with_deleted = models.Manager.from_queryset(BaseModelQuerySet)()

    class Meta:
        abstract = True
        ordering = ['-created_at']

    def delete(self, using=None, keep_parents=False):
        """Soft delete the row."""
        self.deleted_at = timezone.now()
        self.save(using=using, update_fields=['deleted_at', 'updated_at'])

    @property
    def is_deleted(self):
        return self.deleted_at is not None


class TenantOwnedModel(BaseModel):
    """
    Abstract base for rows that belong to one entrepreneur (tenant).

    entrepreneur is the owner used for scoping; created_by records who
    created the row, which may be a super-admin acting for the tenant.
    Both are stamped by the authorization core and never taken from input.
    """
    entrepreneur = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='owned_%(class)ss',
        db_index=True,
        help_text="Entrepreneur that owns this row"
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
        help_text="User who created this row"
    )

    class Meta(BaseModel.Meta):
        abstract = True
