"""Unit tests for ProductService.

Covers:
- create_product: fields copied from the DTO, persisted via the repository.
- update_product: full overwrite, not found.
- get_product: happy path, not found.
- delete_product: happy path, not found, still referenced by orders.
- catalog queries: delegation to the repository.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.products.dtos import ProductDTO
from modules.products.exceptions import ProductInUse, ProductNotFound
from modules.products.models import Product
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


def _make_product(**overrides) -> Product:
    defaults = {
        "id": 1,
        "name": "Widget",
        "description": "Old description",
        "price": Decimal("19.99"),
        "quantity": 10,
        "category": "Tools",
    }
    defaults.update(overrides)
    return Product(**defaults)


# ===========================================================================
# create_product
# ===========================================================================


class TestCreateProduct:
    def test_success(self, service, mock_repo):
        mock_repo.save.side_effect = lambda p: p

        dto = ProductDTO(
            name="Widget",
            price=Decimal("19.99"),
            quantity=5,
            description="A fine widget",
            category="Tools",
        )
        product = service.create_product(dto)

        assert product.name == "Widget"
        assert product.price == Decimal("19.99")
        assert product.quantity == 5
        assert product.description == "A fine widget"
        assert product.category == "Tools"
        mock_repo.save.assert_called_once()

    def test_optional_fields_default(self, service, mock_repo):
        mock_repo.save.side_effect = lambda p: p

        product = service.create_product(ProductDTO(name="Bare", price=Decimal("1.00")))

        assert product.quantity == 0
        assert product.description == ""
        assert product.category == ""


# ===========================================================================
# update_product
# ===========================================================================


class TestUpdateProduct:
    def test_overwrites_every_field(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_product()
        mock_repo.save.side_effect = lambda p: p

        dto = ProductDTO(
            name="Widget Pro",
            price=Decimal("29.99"),
            quantity=3,
            description="",
            category="Hardware",
        )
        product = service.update_product(1, dto)

        assert product.name == "Widget Pro"
        assert product.price == Decimal("29.99")
        assert product.quantity == 3
        assert product.description == ""
        assert product.category == "Hardware"
        mock_repo.save.assert_called_once_with(product)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound, match="Product not found with id: 42"):
            service.update_product(42, ProductDTO(name="X", price=Decimal("1.00")))

        mock_repo.save.assert_not_called()


# ===========================================================================
# get_product
# ===========================================================================


class TestGetProduct:
    def test_success(self, service, mock_repo):
        existing = _make_product()
        mock_repo.get_by_id.return_value = existing

        assert service.get_product(1) is existing

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound) as exc_info:
            service.get_product(999)

        assert exc_info.value.product_id == 999
        assert str(exc_info.value) == "Product not found with id: 999"


# ===========================================================================
# delete_product
# ===========================================================================


class TestDeleteProduct:
    def test_success(self, service, mock_repo):
        mock_repo.exists.return_value = True
        mock_repo.is_referenced.return_value = False

        service.delete_product(1)

        mock_repo.delete.assert_called_once_with(1)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.exists.return_value = False

        with pytest.raises(ProductNotFound):
            service.delete_product(7)

        mock_repo.delete.assert_not_called()

    def test_referenced_by_orders_raises(self, service, mock_repo):
        mock_repo.exists.return_value = True
        mock_repo.is_referenced.return_value = True

        with pytest.raises(ProductInUse, match="referenced by existing orders"):
            service.delete_product(1)

        mock_repo.delete.assert_not_called()


# ===========================================================================
# Queries
# ===========================================================================


class TestQueries:
    def test_list_passes_filters(self, service, mock_repo):
        mock_repo.list.return_value = []
        filters = {"category": "Tools"}

        assert service.list_products(filters) == []
        mock_repo.list.assert_called_once_with(filters)

    def test_search_by_name(self, service, mock_repo):
        mock_repo.search_by_name.return_value = [_make_product()]

        result = service.search_by_name("wid")

        assert len(result) == 1
        mock_repo.search_by_name.assert_called_once_with("wid")

    def test_find_by_category(self, service, mock_repo):
        service.find_by_category("Tools")
        mock_repo.find_by_category.assert_called_once_with("Tools")

    def test_find_low_stock(self, service, mock_repo):
        service.find_low_stock(5)
        mock_repo.find_low_stock.assert_called_once_with(5)
