"""Unit tests for the centralized error-to-response mapping."""

from __future__ import annotations

import pytest
from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from pydantic import BaseModel, ValidationError as PydanticValidationError
from rest_framework import exceptions as drf_exceptions

from modules.core.exception_handler import api_exception_handler, classify, error_body
from modules.core.exceptions import (
    InvalidRequestError,
    NotFoundError,
    UnexpectedError,
)
from modules.products.exceptions import ProductNotFound

pytestmark = pytest.mark.unit


class _Sample(BaseModel):
    size: int


def _pydantic_error() -> PydanticValidationError:
    try:
        _Sample(size="lots")
    except PydanticValidationError as exc:
        return exc
    raise AssertionError("expected a validation error")


class TestClassify:
    def test_domain_error_is_returned_as_is(self):
        error = ProductNotFound(1)
        assert classify(error) is error

    @pytest.mark.parametrize(
        "exc",
        [
            DjangoValidationError("bad value"),
            drf_exceptions.ValidationError({"name": ["This field is required."]}),
            drf_exceptions.ParseError("JSON parse error"),
        ],
    )
    def test_validation_failures_are_invalid_request(self, exc):
        assert isinstance(classify(exc), InvalidRequestError)

    def test_pydantic_errors_name_the_field(self):
        error = classify(_pydantic_error())
        assert isinstance(error, InvalidRequestError)
        assert error.detail.startswith("size:")

    @pytest.mark.parametrize("exc", [Http404(), drf_exceptions.NotFound()])
    def test_not_found(self, exc):
        assert isinstance(classify(exc), NotFoundError)

    @pytest.mark.parametrize("exc", [RuntimeError("boom"), KeyError("x"), ZeroDivisionError()])
    def test_everything_else_is_unexpected(self, exc):
        assert isinstance(classify(exc), UnexpectedError)


class TestErrorBody:
    def test_client_error(self):
        assert error_body("not_found", "gone", 404) == {
            "type": "client_error",
            "errors": [{"code": "not_found", "detail": "gone", "attr": None}],
        }

    def test_server_error(self):
        assert error_body("unexpected", "oops", 500)["type"] == "server_error"


class TestApiExceptionHandler:
    def test_not_found_response(self):
        response = api_exception_handler(ProductNotFound(9), {"view": None})
        assert response.status_code == 404
        assert response.data["errors"][0]["code"] == "not_found"
        assert response.data["errors"][0]["detail"] == "Product 9 not found."

    def test_invalid_request_response(self):
        response = api_exception_handler(_pydantic_error(), {"view": None})
        assert response.status_code == 400
        assert response.data["type"] == "client_error"
        assert response.data["errors"][0]["code"] == "invalid_request"

    def test_unexpected_response_hides_internal_message(self):
        response = api_exception_handler(
            RuntimeError("password=hunter2 in connection string"), {"view": None}
        )
        assert response.status_code == 500
        assert response.data["type"] == "server_error"
        assert "hunter2" not in response.data["errors"][0]["detail"]

    def test_protocol_errors_keep_their_status(self):
        response = api_exception_handler(
            drf_exceptions.MethodNotAllowed("PATCH"), {"view": None}
        )
        assert response.status_code == 405
        assert response.data["errors"][0]["code"] == "method_not_allowed"
