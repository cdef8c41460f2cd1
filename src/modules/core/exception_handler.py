"""Centralized error-to-response mapping.

Installed as DRF's ``EXCEPTION_HANDLER``, so every view renders failures
the same way, whichever module raised them.  Views never catch domain
exceptions themselves.

Response envelope::

    {
        "type": "client_error",
        "errors": [{"code": "not_found", "detail": "...", "attr": null}]
    }
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from pydantic import ValidationError as PydanticValidationError
from rest_framework import exceptions as drf_exceptions
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from modules.core.exceptions import (
    DomainError,
    InvalidRequestError,
    NotFoundError,
    UnexpectedError,
)

logger = structlog.get_logger(__name__)

_INVALID_REQUEST_TYPES = (
    PydanticValidationError,
    DjangoValidationError,
    drf_exceptions.ValidationError,
    drf_exceptions.ParseError,
)
_NOT_FOUND_TYPES = (Http404, drf_exceptions.NotFound)


def classify(exc: Exception) -> DomainError:
    """Map any exception onto exactly one error kind."""
    if isinstance(exc, DomainError):
        return exc
    if isinstance(exc, _INVALID_REQUEST_TYPES):
        return InvalidRequestError(_validation_detail(exc))
    if isinstance(exc, _NOT_FOUND_TYPES):
        return NotFoundError()
    return UnexpectedError()


def error_body(
    code: str, detail: str, http_status: int, attr: Optional[str] = None
) -> Dict[str, Any]:
    return {
        "type": "client_error" if http_status < 500 else "server_error",
        "errors": [{"code": code, "detail": detail, "attr": attr}],
    }


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else None

    if _is_protocol_error(exc):
        # 401/403/405/406/415...: not domain failures, keep DRF's status
        # and headers, only reshape the body.
        response = drf_exception_handler(exc, context)
        response.data = error_body(
            exc.default_code, str(exc.detail), response.status_code
        )
        return response

    error = classify(exc)
    if isinstance(error, UnexpectedError):
        if error is exc:
            logger.error("request.failed", view=view_name, code=error.code)
        else:
            logger.exception(
                "request.unexpected", view=view_name, cause=repr(exc)
            )
    else:
        logger.info(
            "request.rejected",
            view=view_name,
            code=error.code,
            detail=error.detail,
        )

    return Response(
        error_body(error.code, error.detail, error.http_status),
        status=error.http_status,
    )


def _is_protocol_error(exc: Exception) -> bool:
    return isinstance(exc, drf_exceptions.APIException) and not isinstance(
        exc, _INVALID_REQUEST_TYPES + _NOT_FOUND_TYPES
    )


def _validation_detail(exc: Exception) -> str:
    if isinstance(exc, PydanticValidationError):
        return "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            if err["loc"]
            else err["msg"]
            for err in exc.errors()
        )
    if isinstance(exc, DjangoValidationError):
        return "; ".join(exc.messages)
    detail = getattr(exc, "detail", None)
    if isinstance(detail, dict):
        return "; ".join(
            f"{field}: {' '.join(str(m) for m in messages) if isinstance(messages, list) else messages}"
            for field, messages in detail.items()
        )
    if isinstance(detail, list):
        return " ".join(str(m) for m in detail)
    return str(detail or exc)
