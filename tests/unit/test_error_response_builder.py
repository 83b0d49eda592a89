"""Unit tests for ErrorResponseBuilder (RFC 9457 problem details).

Tests cover:
- Status code and title per ApplicationErrorCode
- type/instance/trace_id fields
- Field-level errors from conflicts that name a field
"""

import json
from unittest.mock import MagicMock

import pytest

from testapi.application.errors import ApplicationError, ApplicationErrorCode
from testapi.core.config import settings
from testapi.core.enums import ErrorCode
from testapi.core.errors import ConflictError, NotFoundError
from testapi.presentation.api.v1.errors import ErrorResponseBuilder


def _request(path: str = "/users") -> MagicMock:
    request = MagicMock()
    request.url.path = path
    return request


def _body(response) -> dict:
    return json.loads(response.body)


@pytest.mark.unit
class TestStatusMapping:
    """Test status codes and titles."""

    @pytest.mark.parametrize(
        ("code", "status", "title"),
        [
            (ApplicationErrorCode.NOT_FOUND, 404, "Resource Not Found"),
            (ApplicationErrorCode.CONFLICT, 409, "Resource Conflict"),
            (ApplicationErrorCode.EXTERNAL_SERVICE_ERROR, 502, "External Service Error"),
            (
                ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
                500,
                "Command Execution Failed",
            ),
        ],
    )
    def test_code_maps_to_status_and_title(self, code, status, title):
        error = ApplicationError(code=code, message="boom")

        response = ErrorResponseBuilder.from_application_error(
            error=error, request=_request(), trace_id="trace-1"
        )

        assert response.status_code == status
        body = _body(response)
        assert body["status"] == status
        assert body["title"] == title
        assert body["detail"] == "boom"


@pytest.mark.unit
class TestProblemFields:
    """Test problem details fields."""

    def test_type_instance_and_trace_id(self):
        error = ApplicationError(
            code=ApplicationErrorCode.NOT_FOUND,
            message="User not found",
            domain_error=NotFoundError(
                code=ErrorCode.USER_NOT_FOUND,
                message="User not found",
                resource_type="User",
                resource_id="abc",
            ),
        )

        response = ErrorResponseBuilder.from_application_error(
            error=error, request=_request("/users/abc"), trace_id="trace-2"
        )

        body = _body(response)
        assert body["type"] == f"{settings.api_base_url}/errors/not_found"
        assert body["instance"] == "/users/abc"
        assert body["trace_id"] == "trace-2"
        assert "errors" not in body

    def test_empty_trace_id_omitted(self):
        error = ApplicationError(code=ApplicationErrorCode.CONFLICT, message="taken")

        response = ErrorResponseBuilder.from_application_error(
            error=error, request=_request(), trace_id=""
        )

        assert "trace_id" not in _body(response)

    def test_conflict_names_the_clashing_field(self):
        error = ApplicationError(
            code=ApplicationErrorCode.CONFLICT,
            message="taken",
            domain_error=ConflictError(
                code=ErrorCode.USER_ALREADY_EXISTS,
                message="User with username 'a@b.test' already exists",
                resource_type="User",
                conflicting_field="username",
            ),
        )

        response = ErrorResponseBuilder.from_application_error(
            error=error, request=_request(), trace_id="t"
        )

        assert _body(response)["errors"] == [
            {
                "field": "username",
                "code": "user_already_exists",
                "message": "User with username 'a@b.test' already exists",
            }
        ]

    def test_conflict_without_field_has_no_errors(self):
        error = ApplicationError(
            code=ApplicationErrorCode.CONFLICT,
            message="taken",
            domain_error=ConflictError(
                code=ErrorCode.USER_ALREADY_EXISTS,
                message="taken",
                resource_type="User",
            ),
        )

        response = ErrorResponseBuilder.from_application_error(
            error=error, request=_request(), trace_id="t"
        )

        assert "errors" not in _body(response)
