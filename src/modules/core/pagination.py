"""Pagination primitives shared by repositories and services.

Two listing modes are supported:

- **Offset** (``PageRequest`` -> ``Page``): skip/limit plus a count query,
  giving ``total_pages``/``total_elements`` for random page access.
- **Cursor** (``CursorPage``): filter + ordered key + limit, no count
  query.  Cost stays flat however deep the caller scrolls.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, Iterable, Optional, Sequence, TypeVar

from modules.core.exceptions import InvalidRequestError

T = TypeVar("T")

DEFAULT_MAX_PAGE_SIZE = 100


class InvalidPageRequest(InvalidRequestError):
    """Page index, page size, cursor or sort key is out of range."""


def validate_page_size(size: int, max_size: int = DEFAULT_MAX_PAGE_SIZE) -> int:
    if size < 1:
        raise InvalidPageRequest("Page size must be at least 1.")
    if size > max_size:
        raise InvalidPageRequest(f"Page size must not exceed {max_size}.")
    return size


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page window with an optional sort key.

    ``sort`` is a field name, prefixed with ``-`` for descending order.
    Build instances through ``PageRequest.of`` so the bounds are checked.
    """

    page: int
    size: int
    sort: Optional[str] = None

    @classmethod
    def of(
        cls,
        page: int,
        size: int,
        sort: Optional[str] = None,
        *,
        sortable: Iterable[str] = (),
        max_size: int = DEFAULT_MAX_PAGE_SIZE,
    ) -> PageRequest:
        if page < 0:
            raise InvalidPageRequest("Page index must not be negative.")
        validate_page_size(size, max_size)
        if sort:
            field_name = _strip_direction(sort)
            if field_name not in set(sortable):
                raise InvalidPageRequest(f"Cannot sort by '{field_name}'.")
        else:
            sort = None
        return cls(page=page, size=size, sort=sort)

    @property
    def offset(self) -> int:
        return self.page * self.size

    @property
    def sort_field(self) -> Optional[str]:
        return _strip_direction(self.sort) if self.sort else None


@dataclass(frozen=True)
class Page(Generic[T]):
    """One window of an offset-paginated listing."""

    items: Sequence[T]
    total_elements: int
    page_index: int
    size: int
    total_pages: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "total_pages", math.ceil(self.total_elements / self.size)
        )


@dataclass(frozen=True)
class CursorPage(Generic[T]):
    """One window of a cursor-paginated listing.

    ``next_cursor`` is the key to pass as ``after`` for the next window,
    or ``None`` when the listing is exhausted.
    """

    items: Sequence[T]
    next_cursor: Optional[int] = None

    @property
    def has_next(self) -> bool:
        return self.next_cursor is not None


def _strip_direction(sort: str) -> str:
    # Only a single leading "-" marks descending order.
    return sort[1:] if sort.startswith("-") else sort
