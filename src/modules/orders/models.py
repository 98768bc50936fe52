"""Order and OrderItem models.

Rules implemented:
- An Order exclusively owns its items: deleting the order cascades to
  its items, and items are only written through the order repository.
- ``OrderItem.unit_price`` is a **snapshot** of the product price at
  order time; later catalog price changes never reprice an order.
- ``OrderItem.subtotal`` is always ``quantity * unit_price`` (calculated
  on save).
- Products referenced by items are protected from deletion.
- ``status`` is free text; defaults are applied by ``OrderService`` when
  the request becomes an ``Order``, not here.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.orders.constants import (
    AMOUNT_DECIMAL_PLACES,
    AMOUNT_MAX_DIGITS,
    STATUS_MAX_LENGTH,
)


class Order(BaseModel):
    """Order aggregate root."""

    customer_name = models.CharField(max_length=255)
    customer_email = models.EmailField(max_length=254)
    status = models.CharField(max_length=STATUS_MAX_LENGTH)
    total_amount = models.DecimalField(
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=AMOUNT_DECIMAL_PLACES,
        default=Decimal("0.00"),
    )
    order_date = models.DateTimeField()

    class Meta:
        db_table = "orders"
        ordering = ["-order_date", "-id"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
            models.Index(fields=["customer_email"], name="orders_customer_email_idx"),
            models.Index(fields=["order_date"], name="orders_order_date_idx"),
        ]

    def __str__(self) -> str:
        return f"Order #{self.pk} ({self.status})"


class OrderItem(BaseModel):
    """Order line referencing a Product.

    ``order_id`` is carried for look-up only; an item's lifecycle is
    decided by its order.
    """

    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name="items",
    )
    product = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="order_items",
    )
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    unit_price = models.DecimalField(max_digits=12, decimal_places=2)
    subtotal = models.DecimalField(
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=AMOUNT_DECIMAL_PLACES,
        editable=False,
    )

    class Meta:
        db_table = "order_items"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="order_items_quantity_positive",
            ),
        ]

    def clean(self) -> None:
        super().clean()
        if self.quantity is not None and self.quantity < 1:
            raise ValidationError({"quantity": "Quantity must be at least 1."})

    def save(self, *args: Any, **kwargs: Any) -> None:
        # A line without a captured price is left to the NOT NULL columns.
        if self.unit_price is not None:
            self.subtotal = self.quantity * self.unit_price
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.product_id} x{self.quantity} ({self.subtotal})"
