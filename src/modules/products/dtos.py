"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

``ProductDTO`` is used both for creation and for full replacement
(``PUT``): every mutable field is supplied and overwritten.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator


class ProductDTO(BaseModel):
    """Immutable input for product creation and update.

    Validates:
    - ``name`` is a non-empty string.
    - ``price`` is not negative.
    - ``quantity`` is not negative.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal
    quantity: int = 0
    description: str = ""
    category: str = ""

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip()

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Price cannot be negative.")
        return v

    @field_validator("quantity")
    @classmethod
    def quantity_must_not_be_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Quantity cannot be negative.")
        return v
