from __future__ import annotations

from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestProductModel:
    def test_timestamps_set_on_create(self, make_product):
        product = make_product()
        assert product.created_at is not None
        assert product.updated_at is not None

    def test_updated_at_refreshed_on_save(self, make_product):
        product = make_product()
        first_update = product.updated_at

        product.name = "Renamed"
        product.save()

        assert product.updated_at >= first_update
        assert product.created_at <= product.updated_at

    def test_updated_at_refreshed_with_update_fields(self, make_product):
        product = make_product()
        first_update = product.updated_at

        product.quantity = 3
        product.save(update_fields=["quantity"])
        product.refresh_from_db()

        assert product.quantity == 3
        assert product.updated_at >= first_update

    def test_has_stock_for(self):
        product = Product(name="Widget", price=Decimal("1.00"), quantity=5)
        assert product.has_stock_for(5)
        assert not product.has_stock_for(6)

    def test_clean_rejects_negative_price(self):
        product = Product(name="Widget", price=Decimal("-1.00"), quantity=1)
        with pytest.raises(ValidationError):
            product.full_clean()

    def test_negative_price_rejected_by_database(self, make_product):
        with pytest.raises(IntegrityError), transaction.atomic():
            make_product(price=Decimal("-5.00"))

    def test_str(self):
        product = Product(name="Widget", price=Decimal("1.00"), quantity=4)
        assert str(product) == "Widget (4 in stock)"
