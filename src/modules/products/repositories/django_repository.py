"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising, and the Service Layer decides how to translate a
missing entity into an API response.
"""

from __future__ import annotations

from typing import Any, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.core.pagination import CursorPage, Page, PageRequest
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def find_by_id(self, id: Any) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or non-numeric IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, TypeError, OverflowError, ValidationError):
            return None

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Insert the product, or update it when it already has an id."""
        is_new = entity.pk is None
        entity.save()
        logger.info(
            "product.saved",
            product_id=entity.pk,
            category=entity.category,
            inserted=is_new,
        )
        return entity

    @transaction.atomic
    def delete_by_id(self, id: Any) -> bool:
        """Hard-delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` otherwise.
        """
        try:
            deleted, _ = Product.objects.filter(id=id).delete()
        except (ValueError, TypeError, OverflowError, ValidationError):
            return False
        if deleted:
            logger.info("product.deleted", product_id=id)
        return deleted > 0

    def find_by_category(self, category: str, page_request: PageRequest) -> Page[Product]:
        """Exact-match category filter with offset pagination.

        Issues a COUNT query plus, when the window is in range, a
        LIMIT/OFFSET query.  A sort on ``category`` is dropped because the
        filter already fixes its value.
        """
        queryset = Product.objects.filter(category=category)
        total = queryset.count()

        if page_request.sort and page_request.sort_field != "category":
            queryset = queryset.order_by(page_request.sort)

        start = page_request.offset
        items: List[Product] = []
        if start < total:
            items = list(queryset[start : start + page_request.size])

        return Page(
            items=items,
            total_elements=total,
            page_index=page_request.page,
            size=page_request.size,
        )

    def find_by_category_after(
        self, category: str, after_id: int, size: int
    ) -> CursorPage[Product]:
        """Seek pagination on ``(category, id)``; no COUNT query."""
        rows = list(
            Product.objects.filter(category=category, id__gt=after_id).order_by("id")[
                : size + 1
            ]
        )
        items = rows[:size]
        next_cursor = items[-1].id if len(rows) > size else None
        return CursorPage(items=items, next_cursor=next_cursor)

    def list_distinct_categories(self) -> List[str]:
        return list(
            Product.objects.order_by("category")
            .values_list("category", flat=True)
            .distinct()
        )
