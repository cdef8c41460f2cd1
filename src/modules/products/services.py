"""Product service layer (Use Cases).

Orchestrates business logic for the Product entity, delegating
persistence to the injected ``IProductRepository``.

Rules enforced here:
- ``get_by_id`` is the only place where store absence becomes
  ``ProductNotFound``; update and delete go through it.
- Updates replace both ``category`` and ``name``.
- Pagination input is validated before any store call.
- Duplicate category/name pairs are allowed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

import structlog
from django.db import transaction

from modules.core.exceptions import InvalidRequestError
from modules.core.operations import service_operation
from modules.core.pagination import (
    DEFAULT_MAX_PAGE_SIZE,
    CursorPage,
    InvalidPageRequest,
    Page,
    PageRequest,
    validate_page_size,
)
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

SORTABLE_FIELDS = ("id", "name", "category")


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(
        self,
        repository: IProductRepository,
        max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
    ) -> None:
        self._repo = repository
        self._max_page_size = max_page_size

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @service_operation("product.create")
    @transaction.atomic
    def create(self, category: str, name: str) -> Product:
        """Create and persist a new product.

        Raises:
            InvalidProductAttribute: if ``category`` or ``name`` is empty.
        """
        product = self._repo.save(Product.create(category, name))
        logger.info("product.created", product_id=product.id, category=product.category)
        return product

    @service_operation("product.update")
    @transaction.atomic
    def update(self, id: Any, category: str, name: str) -> Product:
        """Replace both fields of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
            InvalidProductAttribute: if ``category`` or ``name`` is empty.
        """
        product = self.get_by_id(id)
        product.change_category(category)
        product.rename(name)
        product = self._repo.save(product)
        logger.info("product.updated", product_id=product.id)
        return product

    @service_operation("product.delete")
    @transaction.atomic
    def delete_by_id(self, id: Any) -> None:
        """Delete an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self.get_by_id(id)
        self._repo.delete_by_id(product.id)
        logger.info("product.deleted", product_id=product.id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @service_operation("product.get")
    def get_by_id(self, id: Any) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.find_by_id(id)
        if product is None:
            raise ProductNotFound(id)
        return product

    @service_operation("product.list_by_category")
    def list_by_category(
        self,
        category: str,
        page: int,
        size: int,
        sort: Optional[str] = None,
    ) -> Page[Product]:
        """Return one offset page of the products in ``category``.

        Raises:
            InvalidPageRequest: if ``page < 0``, ``size`` is outside
                ``1..max_page_size`` or ``sort`` names an unknown field.
            InvalidRequestError: if ``category`` is blank.
        """
        page_request = PageRequest.of(
            page,
            size,
            sort,
            sortable=SORTABLE_FIELDS,
            max_size=self._max_page_size,
        )
        return self._repo.find_by_category(_require_category(category), page_request)

    @service_operation("product.list_by_category_after")
    def list_by_category_after(
        self, category: str, after_id: int, size: int
    ) -> CursorPage[Product]:
        """Return the products in ``category`` with an id above ``after_id``.

        Raises:
            InvalidPageRequest: if ``after_id < 0`` or ``size`` is out of range.
            InvalidRequestError: if ``category`` is blank.
        """
        if after_id < 0:
            raise InvalidPageRequest("Cursor must not be negative.")
        validate_page_size(size, self._max_page_size)
        return self._repo.find_by_category_after(
            _require_category(category), after_id, size
        )

    @service_operation("product.list_categories")
    def list_categories(self) -> List[str]:
        return self._repo.list_distinct_categories()


def _require_category(category: str) -> str:
    if not category or not category.strip():
        raise InvalidRequestError("Category must not be empty.")
    return category.strip()
