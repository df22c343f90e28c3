"""
Accounting models: income and expense entries of an entrepreneur.
"""
from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import models

from apps.core.models import BaseModelManager, TenantOwnedModel


class AccountingEntryManager(BaseModelManager):
    """Manager for accounting entries."""

    def for_entrepreneur(self, entrepreneur_id):
        return self.filter(entrepreneur_id=entrepreneur_id)


class AccountingEntry(TenantOwnedModel):
    """
    One income ('receives') or expense ('expenses') line.
    """

    TYPE_RECEIVES = 'receives'
    TYPE_EXPENSES = 'expenses'
    TYPE_CHOICES = [
        (TYPE_RECEIVES, 'Receives'),
        (TYPE_EXPENSES, 'Expenses'),
    ]

    category = models.CharField(max_length=100, db_index=True)
    description = models.TextField()
    date = models.DateField(db_index=True)
    type = models.CharField(max_length=10, choices=TYPE_CHOICES, db_index=True)
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))],
        help_text="Positive amount; the sign comes from type"
    )

    objects = AccountingEntryManager()

    class Meta:
        db_table = 'accounting_entries'
        ordering = ['-date', '-created_at']
        verbose_name_plural = 'accounting entries'
        indexes = [
            models.Index(fields=['entrepreneur', 'date'], name='acct_entrepreneur_date_idx'),
        ]

    def __str__(self):
        return f"{self.get_type_display()} {self.amount} ({self.category})"
