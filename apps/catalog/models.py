"""
Catalog models: subscription price tables shown on the public pricing page.

Price tables are global. They have no owner and only super-admins edit them.
"""
from django.db import models

from apps.core.models import BaseModel, BaseModelManager


class PriceTableManager(BaseModelManager):
    """Manager for price table queries."""

    def active(self):
        return self.filter(is_active=True)

    def public(self):
        """Active tables in display order."""
        return self.active().order_by('display_order', 'created_at', 'id')


class PriceTable(BaseModel):
    """
    A plan offered on the pricing page, with 3x and 12x instalment prices.
    """

    title = models.CharField(max_length=255)
    subtitle = models.CharField(max_length=500, blank=True)
    advantages = models.JSONField(
        default=list,
        blank=True,
        help_text="List of advantage lines shown on the card"
    )
    old_price_3x = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    current_price_3x = models.DecimalField(max_digits=10, decimal_places=2)
    old_price_12x = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    current_price_12x = models.DecimalField(max_digits=10, decimal_places=2)
    months = models.PositiveIntegerField(default=3)
    image1 = models.URLField(max_length=500, blank=True)
    image2 = models.URLField(max_length=500, blank=True)
    buy_link = models.URLField(max_length=500)
    is_active = models.BooleanField(default=True, db_index=True)
    display_order = models.IntegerField(default=0, db_index=True)

    objects = PriceTableManager()

    class Meta:
        db_table = 'price_tables'
        ordering = ['display_order', 'created_at']

    def __str__(self):
        return self.title
