"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API exception handler translates them into HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import EntityNotFound, InvalidState


class ProductNotFound(EntityNotFound):
    """The requested product does not exist."""

    def __init__(self, product_id: object) -> None:
        self.product_id = product_id
        super().__init__(f"Product not found with id: {product_id}")


class ProductInUse(InvalidState):
    """The product is referenced by order lines and cannot be deleted."""

    def __init__(self, product_id: object) -> None:
        self.product_id = product_id
        super().__init__(
            f"Product {product_id} is referenced by existing orders and cannot be deleted"
        )
