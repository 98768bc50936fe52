"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
The API exception handler translates them into HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import EntityNotFound, InvalidState


class OrderNotFound(EntityNotFound):
    """The requested order does not exist."""

    def __init__(self, order_id: object) -> None:
        self.order_id = order_id
        super().__init__(f"Order not found with id: {order_id}")


class InsufficientStock(InvalidState):
    """A line asks for more units than the product has left."""

    def __init__(self, product_name: str, requested: int, available: int) -> None:
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(f"Not enough stock for product: {product_name}")
