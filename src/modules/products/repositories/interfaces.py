"""Product repository interface.

Extends ``IRepository[Product]`` with the category look-ups used by the
catalog listings.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.pagination import CursorPage, Page, PageRequest
from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity."""

    @abstractmethod
    def find_by_category(
        self, category: str, page_request: PageRequest
    ) -> Page["Product"]:
        """Return one offset page of products whose category equals ``category``.

        Ordering is applied only when ``page_request.sort`` is set.
        """

    @abstractmethod
    def find_by_category_after(
        self, category: str, after_id: int, size: int
    ) -> CursorPage["Product"]:
        """Return up to ``size`` products with ``id > after_id``, ordered by id."""

    @abstractmethod
    def list_distinct_categories(self) -> List[str]:
        """Return every category value in use, deduplicated and sorted."""
