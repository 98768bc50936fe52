"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising, and the Service Layer decides how to translate a
missing entity into a domain error.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import connection, transaction

from modules.core.filters import apply_filterset
from modules.products.filters import ProductFilter
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int | str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def list(self, filters: Optional[Mapping[str, Any]] = None) -> List[Product]:
        """List products, optionally narrowed by ``ProductFilter`` params.

        Examples of valid filters::

            {"category": "Electronics"}
            {"name": "lap", "max_price": "1500"}

        Raises:
            ValidationError: if a filter value cannot be parsed.
        """
        queryset = Product.objects.all()
        if filters:
            queryset = apply_filterset(ProductFilter, filters, queryset)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info(
            "product.saved",
            product_id=entity.id,
            quantity=entity.quantity,
        )
        return entity

    @transaction.atomic
    def delete(self, id: int | str) -> bool:
        """Delete a product by ID.

        Returns ``True`` if the product was found and deleted,
        ``False`` if no product exists with the given ID.
        """
        product = self.get_by_id(id)
        if not product:
            return False
        product.delete()
        logger.info("product.deleted", product_id=id)
        return True

    def exists(self, id: int | str) -> bool:
        try:
            return Product.objects.filter(id=id).exists()
        except (ValueError, TypeError, ValidationError):
            return False

    # ------------------------------------------------------------------
    # Catalog queries
    # ------------------------------------------------------------------

    def search_by_name(self, name: str) -> List[Product]:
        return list(Product.objects.filter(name__icontains=name))

    def find_by_category(self, category: str) -> List[Product]:
        return list(Product.objects.filter(category=category))

    def find_low_stock(self, threshold: int) -> List[Product]:
        return list(Product.objects.filter(quantity__lt=threshold))

    # ------------------------------------------------------------------
    # Order workflow support
    # ------------------------------------------------------------------

    def get_many_for_update(self, ids: Iterable[int]) -> Dict[int, Product]:
        """Lock the products with *ids*; IDs the key column cannot hold are
        reported as absent instead of reaching the database."""
        low, high = connection.ops.integer_field_range(
            Product._meta.pk.get_internal_type()
        )
        wanted = {
            id
            for id in ids
            if (low is None or id >= low) and (high is None or id <= high)
        }
        queryset = (
            Product.objects.select_for_update()
            .filter(id__in=wanted)
            .order_by("id")
        )
        return {product.id: product for product in queryset}

    def is_referenced(self, id: int | str) -> bool:
        try:
            return Product.objects.filter(id=id, order_items__isnull=False).exists()
        except (ValueError, TypeError, ValidationError):
            return False
