"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).  Absence is reported as ``None``,
    never as an exception; the service layer decides what it means.
    """

    @abstractmethod
    def find_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an entity by its primary key, or ``None``."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (insert or update) an entity and return it."""

    @abstractmethod
    def delete_by_id(self, id: Any) -> bool:
        """Remove an entity by ID; ``True`` if a row was removed."""
