"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateOrderItemDTO``: one requested line (product id + quantity).
- ``CreateOrderDTO``: order creation request with its ordered lines.

``status`` and ``order_date`` stay ``None`` when the client omits them;
``OrderService`` fills in the defaults when it builds the ``Order``.
The client never supplies prices or totals.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class CreateOrderItemDTO(BaseModel):
    """Immutable DTO for a single requested line.

    ``unit_price`` is resolved by the Service Layer from the catalog.
    """

    model_config = ConfigDict(frozen=True)

    product_id: int
    quantity: int

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests.

    Lines keep the caller's order, and the same product may appear on
    several lines: each line is checked against the stock left by the
    lines before it.
    """

    model_config = ConfigDict(frozen=True)

    customer_name: str
    customer_email: str
    items: List[CreateOrderItemDTO]
    status: Optional[str] = None
    order_date: Optional[datetime] = None

    @field_validator("items")
    @classmethod
    def items_must_not_be_empty(
        cls, v: List[CreateOrderItemDTO]
    ) -> List[CreateOrderItemDTO]:
        if not v:
            raise ValueError("Order must have at least one item.")
        return v
