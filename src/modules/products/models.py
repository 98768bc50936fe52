"""Product model with stock control.

Rules implemented:
- Unit price is a non-negative decimal with two places.
- Quantity on hand can never go negative (unsigned column + CHECK).
- ``created_at`` / ``updated_at`` come from ``BaseModel``; every save
  refreshes ``updated_at``.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """Catalog entry and its quantity on hand."""

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    quantity = models.PositiveIntegerField(default=0)
    category = models.CharField(max_length=100, blank=True, default="")

    class Meta:
        db_table = "products"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["category"], name="products_category_idx"),
            models.Index(fields=["quantity"], name="products_quantity_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
        ]

    def clean(self) -> None:
        super().clean()
        if self.price is not None and self.price < 0:
            raise ValidationError({"price": "Price cannot be negative."})
        if self.quantity is not None and self.quantity < 0:
            raise ValidationError({"quantity": "Quantity cannot be negative."})

    def has_stock_for(self, quantity: int) -> bool:
        return self.quantity >= quantity

    def __str__(self) -> str:
        return f"{self.name} ({self.quantity} in stock)"
