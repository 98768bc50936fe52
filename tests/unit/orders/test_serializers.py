from __future__ import annotations

from decimal import Decimal

import pytest
from django.utils import timezone

from modules.orders.models import Order, OrderItem
from modules.orders.serializers import (
    CreateOrderSerializer,
    DateRangeQuerySerializer,
    OrderSerializer,
    StatusQuerySerializer,
)

pytestmark = pytest.mark.unit


def _payload(**overrides):
    data = {
        "customer_name": "Jane Doe",
        "customer_email": "jane@example.com",
        "items": [{"product_id": 1, "quantity": 2}],
    }
    data.update(overrides)
    return data


class TestCreateOrderSerializer:
    def test_valid_minimal_payload(self):
        serializer = CreateOrderSerializer(data=_payload())
        assert serializer.is_valid(), serializer.errors
        assert "status" not in serializer.validated_data

    def test_null_status_and_date_accepted(self):
        serializer = CreateOrderSerializer(
            data=_payload(status=None, order_date=None)
        )
        assert serializer.is_valid(), serializer.errors

    def test_empty_items_rejected(self):
        serializer = CreateOrderSerializer(data=_payload(items=[]))
        assert not serializer.is_valid()
        assert "items" in serializer.errors

    def test_zero_quantity_rejected(self):
        serializer = CreateOrderSerializer(
            data=_payload(items=[{"product_id": 1, "quantity": 0}])
        )
        assert not serializer.is_valid()
        assert "quantity" in serializer.errors["items"][0]

    def test_invalid_email_rejected(self):
        serializer = CreateOrderSerializer(data=_payload(customer_email="nope"))
        assert not serializer.is_valid()
        assert "customer_email" in serializer.errors

    def test_client_total_is_ignored(self):
        serializer = CreateOrderSerializer(data=_payload(total_amount="1.00"))
        assert serializer.is_valid(), serializer.errors
        assert "total_amount" not in serializer.validated_data


class TestQuerySerializers:
    def test_status_required(self):
        assert not StatusQuerySerializer(data={}).is_valid()

    def test_date_range_requires_both_ends(self):
        serializer = DateRangeQuerySerializer(data={"startDate": "2024-01-01T00:00:00"})
        assert not serializer.is_valid()
        assert "endDate" in serializer.errors

    def test_date_range_parses_iso(self):
        serializer = DateRangeQuerySerializer(
            data={"startDate": "2024-01-01T00:00:00", "endDate": "2024-01-31T23:59:59"}
        )
        assert serializer.is_valid(), serializer.errors


class TestOrderSerializer:
    def test_output_shape(self, make_product):
        product = make_product(price=Decimal("100.00"))
        order = Order.objects.create(
            customer_name="Jane Doe",
            customer_email="jane@example.com",
            status="NEW",
            order_date=timezone.now(),
            total_amount=Decimal("300.00"),
        )
        OrderItem.objects.create(
            order=order, product=product, quantity=3, unit_price=product.price
        )

        data = OrderSerializer(order).data

        assert data["total_amount"] == "300.00"
        assert data["customer_email"] == "jane@example.com"
        item = data["items"][0]
        assert item["order_id"] == order.id
        assert item["product_id"] == product.id
        assert item["product"]["name"] == product.name
        assert item["unit_price"] == "100.00"
        assert item["subtotal"] == "300.00"
