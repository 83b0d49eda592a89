"""Integration tests for UserApiClient.

Tests cover:
- HTTP request construction (method, URL, JSON body)
- Response handling (success, 4xx, 5xx)
- Malformed bodies (invalid JSON, non-object, missing fields)
- Timeout and connection error handling

Architecture:
- Uses pytest-httpx for HTTP mocking
- Tests the client in isolation
"""

import json

import httpx
import pytest
from pytest_httpx import HTTPXMock

from testapi.core.enums import ErrorCode
from testapi.core.result import Failure, Success
from testapi.domain.entities import DirectoryProfile, NewDirectoryUser
from testapi.infrastructure.clients.user_api_client import UserApiClient

BASE_URL = "https://user-api.test"


# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture
def client() -> UserApiClient:
    return UserApiClient(base_url=f"{BASE_URL}/", timeout=5.0)


@pytest.fixture
def profile() -> DirectoryProfile:
    return DirectoryProfile(
        first_name="Automation",
        last_name="Individual 1",
        recovery_email="automation_individual_1@test.com",
    )


def _created_body(**overrides) -> dict:
    body = {
        "user_id": "5b1c2d3e-object-id",
        "username": "automation.individual1@hmcts.test",
        "one_time_password": "Xy7!temporary",
    }
    body.update(overrides)
    return body


# =============================================================================
# Test: create_user - Success
# =============================================================================


class TestCreateUserSuccess:
    """Test create_user success scenarios."""

    async def test_returns_new_directory_user(
        self, client: UserApiClient, profile: DirectoryProfile, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/users",
            json=_created_body(),
            status_code=201,
        )

        result = await client.create_user(profile)

        assert result == Success(
            value=NewDirectoryUser(
                user_id="5b1c2d3e-object-id",
                username="automation.individual1@hmcts.test",
                one_time_password="Xy7!temporary",
            )
        )

    async def test_sends_profile_as_json(
        self, client: UserApiClient, profile: DirectoryProfile, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(method="POST", json=_created_body())

        await client.create_user(profile)

        request = httpx_mock.get_request()
        assert request is not None
        assert str(request.url) == f"{BASE_URL}/users"
        assert json.loads(request.content) == {
            "first_name": "Automation",
            "last_name": "Individual 1",
            "recovery_email": "automation_individual_1@test.com",
            "is_test_user": True,
        }


# =============================================================================
# Test: create_user - Upstream errors
# =============================================================================


class TestCreateUserErrors:
    """Test create_user status code handling."""

    @pytest.mark.parametrize("status_code", [500, 503])
    async def test_server_error_is_transient(
        self,
        client: UserApiClient,
        profile: DirectoryProfile,
        httpx_mock: HTTPXMock,
        status_code: int,
    ):
        httpx_mock.add_response(status_code=status_code, text="down for maintenance")

        result = await client.create_user(profile)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USER_API_UNAVAILABLE
        assert result.error.status_code == status_code
        assert result.error.is_transient is True
        assert result.error.response_body == "down for maintenance"

    @pytest.mark.parametrize("status_code", [400, 401, 409])
    async def test_client_error_is_rejected(
        self,
        client: UserApiClient,
        profile: DirectoryProfile,
        httpx_mock: HTTPXMock,
        status_code: int,
    ):
        httpx_mock.add_response(status_code=status_code, json={"error": "nope"})

        result = await client.create_user(profile)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USER_API_REJECTED
        assert result.error.is_transient is False

    async def test_long_body_is_truncated(
        self, client: UserApiClient, profile: DirectoryProfile, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(status_code=500, text="x" * 2000)

        result = await client.create_user(profile)

        assert isinstance(result, Failure)
        assert len(result.error.response_body) == 500


# =============================================================================
# Test: create_user - Malformed responses
# =============================================================================


class TestCreateUserInvalidResponse:
    """Test create_user body validation."""

    async def test_invalid_json(
        self, client: UserApiClient, profile: DirectoryProfile, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(status_code=200, text="<html>not json</html>")

        result = await client.create_user(profile)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USER_API_INVALID_RESPONSE

    async def test_non_object_body(
        self, client: UserApiClient, profile: DirectoryProfile, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(status_code=200, json=[_created_body()])

        result = await client.create_user(profile)

        assert isinstance(result, Failure)
        assert result.error.message == "Expected object response from User API"

    async def test_missing_fields(
        self, client: UserApiClient, profile: DirectoryProfile, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(
            status_code=200, json=_created_body(one_time_password="")
        )

        result = await client.create_user(profile)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USER_API_INVALID_RESPONSE
        assert "one_time_password" in result.error.message


# =============================================================================
# Test: create_user - Transport errors
# =============================================================================


class TestCreateUserTransportErrors:
    """Test timeouts and connection failures."""

    async def test_timeout(
        self, client: UserApiClient, profile: DirectoryProfile, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_exception(httpx.ReadTimeout("timed out"))

        result = await client.create_user(profile)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USER_API_UNAVAILABLE
        assert result.error.is_transient is True
        assert result.error.message == "User API request timed out"

    async def test_connection_error(
        self, client: UserApiClient, profile: DirectoryProfile, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_exception(httpx.ConnectError("connection refused"))

        result = await client.create_user(profile)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USER_API_UNAVAILABLE
        assert result.error.status_code is None
        assert "connection refused" in result.error.message
