"""Unit tests for ErrorResponseBuilder.

Every DomainError subclass maps to its HTTP status and the body carries
``message`` plus the error type URL.
"""

import json
from unittest.mock import Mock

import pytest

from src.core.config import settings
from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder


@pytest.fixture
def request_stub() -> Mock:
    request = Mock()
    request.url.path = "/api/v1/bids/42"
    return request


def body(response) -> dict:
    return json.loads(response.body)


@pytest.mark.unit
class TestErrorResponseBuilder:
    @pytest.mark.parametrize(
        ("error", "status", "title"),
        [
            (
                ValidationError(code=ErrorCode.ID_MISMATCH, message="m", field="id"),
                400,
                "Validation Failed",
            ),
            (
                AuthenticationError(code=ErrorCode.INVALID_CREDENTIALS, message="m"),
                401,
                "Authentication Required",
            ),
            (
                AuthorizationError(code=ErrorCode.PERMISSION_DENIED, message="m"),
                403,
                "Access Denied",
            ),
            (
                NotFoundError(
                    code=ErrorCode.RESOURCE_NOT_FOUND,
                    message="m",
                    resource_type="Bid",
                    resource_id="42",
                ),
                404,
                "Resource Not Found",
            ),
            (
                ConflictError(
                    code=ErrorCode.RESOURCE_CONFLICT, message="m", resource_type="Bid"
                ),
                409,
                "Resource Conflict",
            ),
        ],
    )
    def test_status_mapping(self, error, status, title, request_stub):
        response = ErrorResponseBuilder.from_domain_error(
            error, request_stub, trace_id="trace-1"
        )

        assert response.status_code == status
        data = body(response)
        assert data["status"] == status
        assert data["title"] == title
        assert data["message"] == "m"
        assert data["instance"] == "/api/v1/bids/42"
        assert data["trace_id"] == "trace-1"
        assert data["type"] == f"{settings.api_base_url}/errors/{error.code.value}"

    def test_not_found_body(self, request_stub):
        error = NotFoundError(
            code=ErrorCode.RESOURCE_NOT_FOUND,
            message="Bid not found with the provided id.",
            resource_type="Bid",
            resource_id="42",
        )

        data = body(ErrorResponseBuilder.from_domain_error(error, request_stub))

        assert data["message"] == "Bid not found with the provided id."
        assert "errors" not in data

    def test_validation_error_lists_field(self, request_stub):
        error = ValidationError(
            code=ErrorCode.ID_MISMATCH,
            message="The provided id does not match the id in the request.",
            field="id",
        )

        data = body(ErrorResponseBuilder.from_domain_error(error, request_stub))

        assert data["errors"] == [
            {
                "field": "id",
                "code": "id_mismatch",
                "message": "The provided id does not match the id in the request.",
            }
        ]

    def test_authentication_error_sets_challenge_header(self, request_stub):
        error = AuthenticationError(code=ErrorCode.INVALID_CREDENTIALS, message="m")

        response = ErrorResponseBuilder.from_domain_error(error, request_stub)

        assert response.headers["WWW-Authenticate"] == "Bearer"
