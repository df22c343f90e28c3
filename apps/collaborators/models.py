"""
Collaborator (staff) records kept by an entrepreneur.

These are HR-style records, not login accounts; dashboard logins for staff
are User rows with the collaborator role.
"""
from django.db import models

from apps.core.models import BaseModelManager, TenantOwnedModel


class CollaboratorManager(BaseModelManager):
    """Manager for collaborator queries."""

    def for_entrepreneur(self, entrepreneur_id):
        return self.filter(entrepreneur_id=entrepreneur_id)

    def active(self):
        return self.filter(is_active=True)


class Collaborator(TenantOwnedModel):
    """
    Staff member of an entrepreneur's business.

    Email is unique within a tenant among live rows.
    """

    name = models.CharField(max_length=255)
    email = models.EmailField(help_text="Contact email (unique per entrepreneur)")
    position = models.CharField(
        max_length=255,
        help_text="Job title"
    )
    department = models.CharField(max_length=255, blank=True)
    phone = models.CharField(max_length=50, blank=True)
    skills = models.JSONField(
        default=list,
        blank=True,
        help_text="List of skill labels"
    )
    is_active = models.BooleanField(default=True, db_index=True)
    hire_date = models.DateField(null=True, blank=True)

    objects = CollaboratorManager()

    class Meta:
        db_table = 'collaborators'
        ordering = ['name']
        constraints = [
            models.UniqueConstraint(
                fields=['entrepreneur', 'email'],
                condition=models.Q(deleted_at__isnull=True),
                name='unique_collaborator_email_per_entrepreneur',
            ),
        ]

    def __str__(self):
        return f"{self.name} <{self.email}>"
