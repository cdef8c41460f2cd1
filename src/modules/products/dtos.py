"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for full-replace updates.
- ``ProductListQueryDTO``: query string of the offset listing.
- ``ProductScrollQueryDTO``: query string of the cursor listing.

DTOs only check shape (types, required, non-blank text).  Range checks on
page, size and cursor belong to the service, which runs them before any
store call.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


def _not_blank(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("must not be empty.")
    return v.strip()


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests."""

    model_config = ConfigDict(frozen=True)

    category: str
    name: str

    @field_validator("category", "name")
    @classmethod
    def text_must_not_be_blank(cls, v: str) -> str:
        return _not_blank(v)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    Both fields are required: an update replaces the whole product.
    """

    model_config = ConfigDict(frozen=True)

    category: str
    name: str

    @field_validator("category", "name")
    @classmethod
    def text_must_not_be_blank(cls, v: str) -> str:
        return _not_blank(v)


# ---------------------------------------------------------------------------
# Query DTOs
# ---------------------------------------------------------------------------


class ProductListQueryDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    page: int = 0
    size: int
    sort: Optional[str] = None

    @field_validator("category")
    @classmethod
    def category_must_not_be_blank(cls, v: str) -> str:
        return _not_blank(v)


class ProductScrollQueryDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    after: int = 0
    size: int

    @field_validator("category")
    @classmethod
    def category_must_not_be_blank(cls, v: str) -> str:
        return _not_blank(v)
