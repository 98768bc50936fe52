"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
Write operations are wrapped in ``transaction.atomic()`` so the Order
aggregate (Order + OrderItems) is persisted as one unit.  Reads eagerly
load items and their products to avoid N+1 queries.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.core.filters import apply_filterset
from modules.orders.filters import OrderFilter
from modules.orders.models import Order, OrderItem
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


def _orders() -> models.QuerySet:
    return Order.objects.prefetch_related("items__product")


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Create (aggregate root + children)
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Order:
        order = Order(
            customer_name=data["customer_name"],
            customer_email=data["customer_email"],
            status=data["status"],
            order_date=data["order_date"],
            total_amount=data["total_amount"],
        )
        order.save()

        items = data.get("items", [])
        for item_data in items:
            OrderItem(
                order=order,
                product=item_data["product"],
                quantity=item_data["quantity"],
                unit_price=item_data["unit_price"],
            ).save()

        logger.info("order.persisted", order_id=order.id, item_count=len(items))
        return order

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: int | str) -> Optional[Order]:
        """Retrieve an order with its items and their products.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return _orders().filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def get_for_update(self, id: int | str) -> Optional[Order]:
        try:
            return Order.objects.select_for_update().filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def list(self, filters: Optional[Mapping[str, Any]] = None) -> List[Order]:
        """List orders, optionally narrowed by ``OrderFilter`` params.

        Supported filter keys: ``status``, ``customer_email``,
        ``start_date``, ``end_date``, ``min_total``, ``max_total``.
        """
        queryset = _orders()
        if filters:
            queryset = apply_filterset(OrderFilter, filters, queryset)
        return list(queryset)

    def exists(self, id: int | str) -> bool:
        try:
            return Order.objects.filter(id=id).exists()
        except (ValueError, TypeError, ValidationError):
            return False

    def find_by_status(self, status: str) -> List[Order]:
        return list(_orders().filter(status=status))

    def find_by_customer_email(self, email: str) -> List[Order]:
        return list(_orders().filter(customer_email=email))

    def find_by_date_range(self, start: datetime, end: datetime) -> List[Order]:
        return list(_orders().filter(order_date__range=(start, end)))

    # ------------------------------------------------------------------
    # Save / Delete (IRepository contract)
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        """Persist the order row (items are written only by ``create``)."""
        entity.save()
        logger.info("order.saved", order_id=entity.id, status=entity.status)
        return entity

    @transaction.atomic
    def delete(self, id: int | str) -> bool:
        """Delete an order; its items go with it (CASCADE)."""
        order = self.get_by_id(id)
        if not order:
            return False
        _, deleted = order.delete()
        logger.info(
            "order.deleted",
            order_id=id,
            items_deleted=deleted.get(OrderItem._meta.label, 0),
        )
        return True
