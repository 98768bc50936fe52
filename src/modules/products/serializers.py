"""Product DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views).
Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from django.conf import settings
from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read/write serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "quantity",
            "category",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class ProductSearchQuerySerializer(serializers.Serializer):
    """Validates ``GET /api/products/search?name=``."""

    name = serializers.CharField(allow_blank=True, trim_whitespace=False)


class LowStockQuerySerializer(serializers.Serializer):
    """Validates ``GET /api/products/low-stock?threshold=``."""

    threshold = serializers.IntegerField(
        required=False,
        default=settings.LOW_STOCK_DEFAULT_THRESHOLD,
    )
