"""Error taxonomy shared by every module.

Each failure kind carries a fixed, externally visible HTTP status and a
stable machine-readable code.  Module-specific exceptions (e.g.
``ProductNotFound``) subclass one of the kinds below, so the boundary
layer only needs to know about ``DomainError``.

- ``NotFoundError``: the requested entity does not exist (404).
- ``InvalidRequestError``: malformed pagination or bad field values (400).
- ``UnexpectedError``: anything else, e.g. persistence failures (500).
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    NOT_FOUND = ("not_found", 404, "Requested resource was not found.")
    INVALID_REQUEST = ("invalid_request", 400, "Request is invalid.")
    UNEXPECTED = ("unexpected", 500, "An unexpected error occurred.")

    def __init__(self, code: str, http_status: int, description: str) -> None:
        self.code = code
        self.http_status = http_status
        self.description = description


class DomainError(Exception):
    """Base class for every classified failure.

    ``detail`` is the human-readable message sent to the caller; it
    defaults to the description of the error kind.
    """

    error_code: ErrorCode = ErrorCode.UNEXPECTED

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.error_code.description
        super().__init__(self.detail)

    @property
    def code(self) -> str:
        return self.error_code.code

    @property
    def http_status(self) -> int:
        return self.error_code.http_status


class NotFoundError(DomainError):
    """The requested entity does not exist."""

    error_code = ErrorCode.NOT_FOUND


class InvalidRequestError(DomainError):
    """The request failed validation before reaching the store."""

    error_code = ErrorCode.INVALID_REQUEST


class UnexpectedError(DomainError):
    """Any failure that is neither ``NotFound`` nor ``InvalidRequest``.

    Raised without a detail so the caller only sees the generic
    description; the underlying cause is logged and chained.
    """

    error_code = ErrorCode.UNEXPECTED
