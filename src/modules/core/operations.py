"""Failure classification for service-layer operations."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

import structlog

from modules.core.exceptions import DomainError, UnexpectedError

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def service_operation(name: str) -> Callable[[F], F]:
    """Mark a service method as a named operation.

    ``DomainError`` subclasses propagate unchanged.  Any other exception
    is logged with the operation name, the call arguments and the cause,
    then re-raised as ``UnexpectedError`` chained to the original.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(self, *args: Any, **kwargs: Any) -> Any:
            try:
                return func(self, *args, **kwargs)
            except DomainError:
                raise
            except Exception as exc:
                logger.exception(
                    f"{name}.unexpected",
                    operation=name,
                    args=[str(a) for a in args],
                    kwargs={k: str(v) for k, v in kwargs.items()},
                    cause=repr(exc),
                )
                raise UnexpectedError() from exc

        return wrapper  # type: ignore[return-value]

    return decorator
