"""Order service layer (Use Cases).

Orchestrates order creation, status updates and deletion.  All write
operations are atomic: the service defines the unit-of-work boundary.

Order creation rules:
- Lines are processed strictly in the order the caller sent them.
- Each line is checked against the stock left by the lines before it,
  so two lines on the same product compound against one stock figure.
- A missing product or a short line aborts the whole order; nothing is
  written until every line has passed.
- Each line snapshots the product's price; the order total is the sum
  of ``unit_price * quantity`` and is never taken from the client.
- A total that does not fit the amount column rejects the order.
- Product rows are locked (SELECT FOR UPDATE) for the whole transaction
  so concurrent orders cannot oversell.

Status updates accept any string.  Deleting an order never restocks.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from modules.orders.constants import DEFAULT_ORDER_STATUS, MAX_ORDER_AMOUNT
from modules.orders.exceptions import InsufficientStock, OrderNotFound
from modules.products.exceptions import ProductNotFound

if TYPE_CHECKING:
    from modules.orders.dtos import CreateOrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._order_repo = order_repository
        self._product_repo = product_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_order(self, dto: CreateOrderDTO) -> Order:
        """Create an order, reserving stock for every line.

        Steps:
        1. Lock every requested product row (ascending ID order).
        2. For each line, in request order:
           - Resolve the product (``ProductNotFound`` if absent).
           - Check the running quantity (``InsufficientStock`` if short).
           - Deduct the quantity in memory and snapshot the price.
        3. Write the decremented products.
        4. Persist the order and its items with the computed total.

        Raises:
            ProductNotFound: a line names a product that does not exist.
            InsufficientStock: a line asks for more than is left.
            ValidationError: the total does not fit the amount column.
        """
        log = logger.bind(line_count=len(dto.items))
        log.info("order.creation_started")

        products = self._product_repo.get_many_for_update(
            item.product_id for item in dto.items
        )

        lines: List[Dict[str, Any]] = []
        total = Decimal("0.00")

        for item in dto.items:
            product = products.get(item.product_id)
            if product is None:
                log.warning("order.product_missing", product_id=item.product_id)
                raise ProductNotFound(item.product_id)
            if not product.has_stock_for(item.quantity):
                log.warning(
                    "order.insufficient_stock",
                    product_id=product.id,
                    requested=item.quantity,
                    available=product.quantity,
                )
                raise InsufficientStock(product.name, item.quantity, product.quantity)

            product.quantity -= item.quantity
            lines.append(
                {
                    "product": product,
                    "quantity": item.quantity,
                    "unit_price": product.price,
                }
            )
            total += product.price * item.quantity

        if total > MAX_ORDER_AMOUNT:
            log.warning("order.total_out_of_range", total_amount=str(total))
            raise ValidationError(
                {"items": f"Order total cannot exceed {MAX_ORDER_AMOUNT}."}
            )

        for product in self._touched(lines):
            self._product_repo.save(product)
            log.info(
                "order.stock_reserved",
                product_id=product.id,
                remaining=product.quantity,
            )

        order = self._order_repo.create(
            {
                "customer_name": dto.customer_name,
                "customer_email": dto.customer_email,
                "status": dto.status or DEFAULT_ORDER_STATUS,
                "order_date": dto.order_date or timezone.now(),
                "total_amount": total,
                "items": lines,
            }
        )

        log.info("order.created", order_id=order.id, total_amount=str(total))
        return self._order_repo.get_by_id(order.id) or order

    @transaction.atomic
    def update_status(self, order_id: int | str, new_status: str) -> Order:
        """Set an order's status to *new_status*, whatever it was before.

        Raises:
            OrderNotFound: order does not exist.
        """
        order = self._order_repo.get_for_update(order_id)
        if not order:
            raise OrderNotFound(order_id)

        old_status = order.status
        order.status = new_status
        self._order_repo.save(order)

        logger.info(
            "order.status_updated",
            order_id=order.id,
            old_status=old_status,
            new_status=new_status,
        )
        return self._order_repo.get_by_id(order.id) or order

    @transaction.atomic
    def delete_order(self, order_id: int | str) -> None:
        """Delete an order and its items.  Stock is not restored.

        Raises:
            OrderNotFound: order does not exist.
        """
        if not self._order_repo.exists(order_id):
            raise OrderNotFound(order_id)
        self._order_repo.delete(order_id)
        logger.info("order.removed", order_id=order_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: int | str) -> Order:
        """Retrieve a single order by ID.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = self._order_repo.get_by_id(order_id)
        if not order:
            raise OrderNotFound(order_id)
        return order

    def list_orders(self, filters: Optional[Mapping[str, Any]] = None) -> List[Order]:
        return self._order_repo.list(filters)

    def find_by_status(self, status: str) -> List[Order]:
        return self._order_repo.find_by_status(status)

    def find_by_customer_email(self, email: str) -> List[Order]:
        return self._order_repo.find_by_customer_email(email)

    def find_by_date_range(self, start: datetime, end: datetime) -> List[Order]:
        return self._order_repo.find_by_date_range(start, end)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _touched(lines: List[Dict[str, Any]]) -> List[Product]:
        """Distinct products referenced by *lines*, first-seen order."""
        seen: Dict[int, Product] = {}
        for line in lines:
            seen.setdefault(line["product"].id, line["product"])
        return list(seen.values())
