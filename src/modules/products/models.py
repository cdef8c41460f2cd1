"""Product model.

Rules implemented:
- ``id`` is assigned by the database on first save and never changes.
- ``category`` is free text: near-duplicates such as "Toys" and "toys"
  are accepted and listed as distinct categories.
- ``category`` and ``name`` are non-empty and at most 255 characters.
  The check lives in ``_clean_text`` and runs from ``create``,
  ``change_category`` and ``rename``.
"""

from __future__ import annotations

from django.db import models

from modules.products.exceptions import InvalidProductAttribute

TEXT_MAX_LENGTH = 255


def _clean_text(field: str, value: str | None) -> str:
    if value is None or not str(value).strip():
        raise InvalidProductAttribute(f"Product {field} must not be empty.")
    value = str(value).strip()
    if len(value) > TEXT_MAX_LENGTH:
        raise InvalidProductAttribute(
            f"Product {field} must be at most {TEXT_MAX_LENGTH} characters."
        )
    return value


class Product(models.Model):
    """Catalog product.

    Build new instances with ``Product.create`` and change them with
    ``change_category`` / ``rename`` instead of assigning the fields.
    """

    id = models.BigAutoField(primary_key=True)
    category = models.CharField(max_length=TEXT_MAX_LENGTH)
    name = models.CharField(max_length=TEXT_MAX_LENGTH)

    class Meta:
        db_table = "products"
        indexes = [
            models.Index(fields=["category", "id"], name="products_category_idx"),
        ]

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @classmethod
    def create(cls, category: str, name: str) -> Product:
        """Build an unsaved product; the store assigns ``id`` on save."""
        return cls(
            category=_clean_text("category", category),
            name=_clean_text("name", name),
        )

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------

    def change_category(self, category: str) -> None:
        self.category = _clean_text("category", category)

    def rename(self, name: str) -> None:
        self.name = _clean_text("name", name)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.name} ({self.category})"
