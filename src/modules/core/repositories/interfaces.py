"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that every
domain-specific repository interface extends.  Service-layer code
depends on this abstraction, never on the Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Mapping, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the
    repository (e.g. ``Product``, ``Order``).
    """

    @abstractmethod
    def get_by_id(self, id: int | str) -> Optional[T]:
        """Retrieve an entity by its primary key, or ``None``."""

    @abstractmethod
    def list(self, filters: Optional[Mapping[str, Any]] = None) -> List[T]:
        """List entities with optional filters."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""

    @abstractmethod
    def delete(self, id: int | str) -> bool:
        """Remove an entity by ID.  Returns ``False`` if it did not exist."""

    @abstractmethod
    def exists(self, id: int | str) -> bool:
        """Return ``True`` if an entity with this ID exists."""
