"""Product domain exceptions.

Raised by the model and the Service Layer.  Each one extends a kind of
the core error taxonomy, so the centralized exception handler renders
it without the views knowing about it.
"""

from __future__ import annotations

from typing import Any

from modules.core.exceptions import InvalidRequestError, NotFoundError


class ProductNotFound(NotFoundError):
    """The requested product does not exist."""

    def __init__(self, product_id: Any) -> None:
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found.")


class InvalidProductAttribute(InvalidRequestError):
    """A category or name value is empty or too long."""
