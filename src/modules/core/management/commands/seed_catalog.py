from __future__ import annotations

import random

from django.core.management.base import BaseCommand

from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

SEED_CATALOG = {
    "electronics": ["Laptop", "Headphones", "Monitor", "Keyboard", "Webcam"],
    "toys": ["Robot", "Puzzle", "Kite", "Yo-yo"],
    "books": ["Novel", "Cookbook", "Atlas", "Dictionary"],
    "garden": ["Shovel", "Hose", "Planter"],
}


class Command(BaseCommand):
    help = "Seed database with catalog products for local development."

    def add_arguments(self, parser):
        parser.add_argument(
            "--per-name",
            type=int,
            default=3,
            help="Variants created for each seed product name.",
        )
        parser.add_argument(
            "--flush",
            action="store_true",
            help="Delete every existing product first.",
        )

    def handle(self, *args, **options):
        random.seed(42)
        if options["flush"]:
            deleted, _ = Product.objects.all().delete()
            self.stdout.write(f"Deleted {deleted} products.")

        service = ProductService(repository=ProductDjangoRepository())
        created = 0
        for category, names in SEED_CATALOG.items():
            for name in names:
                for variant in range(1, options["per_name"] + 1):
                    service.create(category, f"{name} {random.choice('ABCDEFG')}{variant}")
                    created += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={created}, "
                f"categories={len(service.list_categories())}"
            )
        )
