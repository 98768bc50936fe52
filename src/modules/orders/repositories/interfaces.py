"""Order repository interface.

Extends ``IRepository[Order]`` with the methods required by the Order
aggregate: atomic creation with items, a locking read for updates and
the status / customer / date-range look-ups.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root.

    The aggregate includes its OrderItem children; mutations must be
    atomic.
    """

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Order:
        """Create an order with its items atomically.

        ``data`` must include ``customer_name``, ``customer_email``,
        ``status``, ``order_date``, ``total_amount`` and ``items`` (list
        of dicts with ``product``, ``quantity``, ``unit_price``).
        """

    @abstractmethod
    def get_for_update(self, id: int | str) -> Optional[Order]:
        """Retrieve an order with a row-level lock (SELECT FOR UPDATE)."""

    @abstractmethod
    def find_by_status(self, status: str) -> List[Order]:
        """Orders whose status equals *status*."""

    @abstractmethod
    def find_by_customer_email(self, email: str) -> List[Order]:
        """Orders placed with exactly this customer e-mail."""

    @abstractmethod
    def find_by_date_range(self, start: datetime, end: datetime) -> List[Order]:
        """Orders whose order date lies in ``[start, end]``."""
