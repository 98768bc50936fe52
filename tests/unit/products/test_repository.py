"""Tests for ProductDjangoRepository against the test database."""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.utils import timezone

from modules.orders.models import Order, OrderItem
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


class TestLookup:
    def test_get_by_id(self, repo, make_product):
        product = make_product()
        assert repo.get_by_id(product.id) == product

    def test_get_by_id_missing_returns_none(self, repo):
        assert repo.get_by_id(999) is None

    def test_get_by_id_malformed_returns_none(self, repo):
        assert repo.get_by_id("not-a-number") is None

    def test_exists(self, repo, make_product):
        product = make_product()
        assert repo.exists(product.id) is True
        assert repo.exists(999) is False
        assert repo.exists("abc") is False


class TestSaveDelete:
    def test_save_assigns_id(self, repo):
        product = repo.save(Product(name="New", price=Decimal("5.00"), quantity=1))
        assert product.id is not None
        assert Product.objects.filter(id=product.id).exists()

    def test_delete(self, repo, make_product):
        product = make_product()
        assert repo.delete(product.id) is True
        assert not Product.objects.filter(id=product.id).exists()

    def test_delete_missing(self, repo):
        assert repo.delete(999) is False


class TestCatalogQueries:
    def test_search_by_name_is_case_insensitive_substring(self, repo, make_product):
        laptop = make_product(name="Gaming Laptop")
        make_product(name="Keyboard")

        assert repo.search_by_name("LAPTOP") == [laptop]
        assert repo.search_by_name("ming lap") == [laptop]

    def test_search_with_empty_name_returns_all(self, repo, make_product):
        make_product(name="A")
        make_product(name="B")
        assert len(repo.search_by_name("")) == 2

    def test_find_by_category_is_exact(self, repo, make_product):
        electronics = make_product(category="Electronics")
        make_product(category="Accessories")

        assert repo.find_by_category("Electronics") == [electronics]

    def test_find_low_stock_is_strictly_below(self, repo, make_product):
        low = make_product(name="Low", quantity=4)
        make_product(name="Edge", quantity=5)
        make_product(name="Plenty", quantity=50)

        assert repo.find_low_stock(5) == [low]


class TestListFilters:
    def test_list_without_filters(self, repo, make_product):
        make_product()
        make_product()
        assert len(repo.list()) == 2

    def test_list_filtered_by_price_range(self, repo, make_product):
        make_product(name="Cheap", price=Decimal("5.00"))
        mid = make_product(name="Mid", price=Decimal("50.00"))
        make_product(name="Pricey", price=Decimal("500.00"))

        result = repo.list({"min_price": "10", "max_price": "100"})

        assert result == [mid]

    def test_list_invalid_filter_raises(self, repo):
        with pytest.raises(ValidationError):
            repo.list({"min_price": "cheap"})


class TestOrderWorkflowSupport:
    def test_get_many_for_update_keys_by_id(self, repo, make_product):
        a = make_product(name="A")
        b = make_product(name="B")

        locked = repo.get_many_for_update([b.id, a.id, b.id, 999])

        assert set(locked) == {a.id, b.id}
        assert locked[a.id].name == "A"

    def test_get_many_for_update_skips_ids_beyond_key_range(self, repo, make_product):
        product = make_product()

        locked = repo.get_many_for_update([2**70, product.id, -(2**70)])

        assert list(locked) == [product.id]

    def test_is_referenced(self, repo, make_product):
        product = make_product()
        assert repo.is_referenced(product.id) is False

        order = Order.objects.create(
            customer_name="Jane",
            customer_email="jane@example.com",
            status="NEW",
            order_date=timezone.now(),
            total_amount=Decimal("100.00"),
        )
        OrderItem.objects.create(
            order=order, product=product, quantity=1, unit_price=product.price
        )

        assert repo.is_referenced(product.id) is True
