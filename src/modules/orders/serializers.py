"""Order DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views).
Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.constants import STATUS_MAX_LENGTH
from modules.orders.models import Order, OrderItem
from modules.products.serializers import ProductSerializer

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class CreateOrderItemSerializer(serializers.Serializer):
    """Validates a single line in an order creation request."""

    product_id = serializers.IntegerField()
    quantity = serializers.IntegerField(min_value=1)


class CreateOrderSerializer(serializers.Serializer):
    """Validates the order creation payload.

    Prices and totals are not accepted: they are resolved server-side.
    """

    customer_name = serializers.CharField(max_length=255)
    customer_email = serializers.EmailField()
    status = serializers.CharField(
        max_length=STATUS_MAX_LENGTH, required=False, allow_null=True
    )
    order_date = serializers.DateTimeField(required=False, allow_null=True)
    items = CreateOrderItemSerializer(many=True, allow_empty=False)


class StatusQuerySerializer(serializers.Serializer):
    """Validates ``PUT /api/orders/{id}/status?status=``."""

    status = serializers.CharField(max_length=STATUS_MAX_LENGTH)


class DateRangeQuerySerializer(serializers.Serializer):
    """Validates ``GET /api/orders/date-range?startDate=&endDate=``."""

    startDate = serializers.DateTimeField()
    endDate = serializers.DateTimeField()


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class OrderItemSerializer(serializers.ModelSerializer):
    """Read serializer for an order line with its resolved product."""

    product = ProductSerializer(read_only=True)

    class Meta:
        model = OrderItem
        fields = [
            "id",
            "order_id",
            "product_id",
            "product",
            "quantity",
            "unit_price",
            "subtotal",
        ]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Read serializer for orders with nested lines."""

    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "customer_name",
            "customer_email",
            "status",
            "total_amount",
            "order_date",
            "created_at",
            "updated_at",
            "items",
        ]
        read_only_fields = fields
