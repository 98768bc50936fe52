"""Order domain constants.

Status is an open string: any value is accepted on update.  The values
below are the ones the system itself uses or documents; they are never
enforced as a transition table.
"""

from decimal import Decimal

from django.db import models


class OrderStatus(models.TextChoices):
    NEW = "NEW", "New"
    PENDING = "PENDING", "Pending"
    CONFIRMED = "CONFIRMED", "Confirmed"
    SHIPPED = "SHIPPED", "Shipped"
    DELIVERED = "DELIVERED", "Delivered"
    CANCELLED = "CANCELLED", "Cancelled"


DEFAULT_ORDER_STATUS = OrderStatus.NEW.value

STATUS_MAX_LENGTH = 32

# Order totals and line subtotals share one column size.
AMOUNT_MAX_DIGITS = 14
AMOUNT_DECIMAL_PLACES = 2
MAX_ORDER_AMOUNT = (
    Decimal(10) ** (AMOUNT_MAX_DIGITS - AMOUNT_DECIMAL_PLACES) - Decimal("0.01")
)
