"""Product service layer (Use Cases).

Orchestrates catalog CRUD for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.  No business rules
beyond input validation (DTO) and timestamp stamping (model).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Mapping, Optional

import structlog
from django.db import transaction

from modules.products.exceptions import ProductInUse, ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import ProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

MUTABLE_FIELDS = ("name", "description", "price", "quantity", "category")


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: ProductDTO) -> Product:
        product = Product(**{field: getattr(dto, field) for field in MUTABLE_FIELDS})
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.id, name=product.name)
        return product

    @transaction.atomic
    def update_product(self, id: int | str, dto: ProductDTO) -> Product:
        """Overwrite every mutable field of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(id)

        for field in MUTABLE_FIELDS:
            setattr(product, field, getattr(dto, field))

        product = self._repo.save(product)
        logger.info("product.updated", product_id=product.id)
        return product

    @transaction.atomic
    def delete_product(self, id: int | str) -> None:
        """Delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
            ProductInUse: if order lines still reference it.
        """
        if not self._repo.exists(id):
            raise ProductNotFound(id)
        if self._repo.is_referenced(id):
            logger.warning("product.delete_refused", product_id=id)
            raise ProductInUse(id)
        self._repo.delete(id)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, filters: Optional[Mapping[str, Any]] = None) -> List[Product]:
        return self._repo.list(filters)

    def get_product(self, id: int | str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(id)
        return product

    def search_by_name(self, name: str) -> List[Product]:
        return self._repo.search_by_name(name)

    def find_by_category(self, category: str) -> List[Product]:
        return self._repo.find_by_category(category)

    def find_low_stock(self, threshold: int) -> List[Product]:
        return self._repo.find_low_stock(threshold)
