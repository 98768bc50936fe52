from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.dtos import ProductDTO

pytestmark = pytest.mark.unit


class TestProductDTO:
    def test_valid(self):
        dto = ProductDTO(name="Laptop", price=Decimal("1299.99"), quantity=10)
        assert dto.name == "Laptop"
        assert dto.price == Decimal("1299.99")
        assert dto.quantity == 10
        assert dto.description == ""
        assert dto.category == ""

    def test_strips_name(self):
        dto = ProductDTO(name="  Laptop  ", price=Decimal("1.00"))
        assert dto.name == "Laptop"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="Name must not be empty"):
            ProductDTO(name="   ", price=Decimal("1.00"))

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="Price cannot be negative"):
            ProductDTO(name="Laptop", price=Decimal("-0.01"))

    def test_zero_price_allowed(self):
        assert ProductDTO(name="Freebie", price=Decimal("0")).price == Decimal("0")

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError, match="Quantity cannot be negative"):
            ProductDTO(name="Laptop", price=Decimal("1.00"), quantity=-1)

    def test_is_frozen(self):
        dto = ProductDTO(name="Laptop", price=Decimal("1.00"))
        with pytest.raises(ValidationError):
            dto.name = "Other"
