"""Product repository interface.

Extends ``IRepository[Product]`` with the catalog look-ups exposed by the
API and the row-locking read used by the order workflow.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Dict, Iterable, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def search_by_name(self, name: str) -> List[Product]:
        """Products whose name contains *name*, ignoring case."""

    @abstractmethod
    def find_by_category(self, category: str) -> List[Product]:
        """Products whose category equals *category* exactly."""

    @abstractmethod
    def find_low_stock(self, threshold: int) -> List[Product]:
        """Products with quantity strictly below *threshold*."""

    @abstractmethod
    def get_many_for_update(self, ids: Iterable[int]) -> Dict[int, Product]:
        """Lock and return the products with the given IDs, keyed by ID.

        Rows are locked (SELECT FOR UPDATE) in ascending ID order so
        concurrent orders cannot deadlock.  Missing IDs are simply absent
        from the result.  Must be called inside a transaction.
        """

    @abstractmethod
    def is_referenced(self, id: int | str) -> bool:
        """Return ``True`` if any order line points at this product."""
