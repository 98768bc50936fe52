from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.products.models import Product

# (name, description, price, quantity, category)
CATALOG = [
    (
        "Laptop",
        "High-performance laptop with 16GB RAM and 512GB SSD",
        Decimal("1299.99"),
        10,
        "Electronics",
    ),
    (
        "Smartphone",
        "Latest model with 128GB storage and 5G capability",
        Decimal("899.99"),
        15,
        "Electronics",
    ),
    (
        "Headphones",
        "Noise-cancelling wireless headphones with 30-hour battery life",
        Decimal("249.99"),
        20,
        "Accessories",
    ),
    ("Monitor", "27-inch 4K monitor", Decimal("350.00"), 8, "Electronics"),
    ("Keyboard", "Mechanical gaming keyboard", Decimal("120.00"), 25, "Accessories"),
]


class Command(BaseCommand):
    help = "Seed an empty catalog with sample products."

    def handle(self, *args, **options):
        if Product.objects.exists():
            self.stdout.write(
                self.style.WARNING("Catalog already has products, skipping seed.")
            )
            return

        self.stdout.write("Creating products...")
        products = self._seed_products()
        self.stdout.write(self.style.SUCCESS(f"Seed completed: products={len(products)}"))

    @transaction.atomic
    def _seed_products(self) -> list[Product]:
        return [
            Product.objects.create(
                name=name,
                description=description,
                price=price,
                quantity=quantity,
                category=category,
            )
            for name, description, price, quantity, category in CATALOG
        ]
