"""User API (directory) client.

Creates directory (AAD) accounts for test users through the User API:
- HTTP request execution with timeout/connection error handling
- Response status code interpretation
- JSON parsing with error handling
- Structured logging (never logs the one-time password)

Architecture:
    - Infrastructure layer (adapter implementing UserApiProtocol)
    - Uses httpx for async HTTP
    - Returns Result types (no exceptions for upstream failures)
    - No retries; the caller decides what to do with transient failures
"""

from typing import Any

import httpx
import structlog

from testapi.core.constants import RESPONSE_BODY_MAX_LENGTH, USER_API_TIMEOUT_DEFAULT
from testapi.core.enums import ErrorCode
from testapi.core.result import Failure, Result, Success
from testapi.domain.entities import DirectoryProfile, NewDirectoryUser
from testapi.domain.errors import UserApiError

_NEW_USER_FIELDS = ("user_id", "username", "one_time_password")


class UserApiClient:
    """httpx client for the User API.

    Attributes:
        _base_url: User API base URL (without trailing slash).
        _timeout: HTTP request timeout in seconds.
        _logger: Structured logger bound to the user_api channel.

    Example:
        >>> client = UserApiClient(base_url="http://localhost:5200")
        >>> result = await client.create_user(
        ...     DirectoryProfile(
        ...         first_name="Automation",
        ...         last_name="Individual 1",
        ...         recovery_email="automation_individual_1@test.com",
        ...     )
        ... )
        >>> match result:
        ...     case Success(value=new_user):
        ...         print(new_user.username)
        ...     case Failure(error=error):
        ...         print(error.message)
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = USER_API_TIMEOUT_DEFAULT,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._logger = structlog.get_logger("user_api")

    async def create_user(
        self, profile: DirectoryProfile
    ) -> Result[NewDirectoryUser, UserApiError]:
        """Create a directory account.

        Args:
            profile: Names and recovery email of the account to create.

        Returns:
            Success(NewDirectoryUser): Account created by the directory.
            Failure(UserApiError): Timeout, connection failure, non-2xx status
                or malformed response body.
        """
        payload = {
            "first_name": profile.first_name,
            "last_name": profile.last_name,
            "recovery_email": profile.recovery_email,
            "is_test_user": profile.is_test_user,
        }

        response_result = await self._execute_request(
            method="POST",
            path="/users",
            json_data=payload,
            operation="create_user",
        )
        match response_result:
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=response):
                pass

        data_result = self._parse_json_object(response, "create_user")
        match data_result:
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=data):
                pass

        missing = [field for field in _NEW_USER_FIELDS if not data.get(field)]
        if missing:
            self._logger.warning(
                "user_api_missing_fields",
                operation="create_user",
                missing=missing,
            )
            return Failure(
                error=UserApiError(
                    code=ErrorCode.USER_API_INVALID_RESPONSE,
                    message=f"User API response missing fields: {', '.join(missing)}",
                    status_code=response.status_code,
                )
            )

        new_user = NewDirectoryUser(
            user_id=str(data["user_id"]),
            username=str(data["username"]),
            one_time_password=str(data["one_time_password"]),
        )
        self._logger.info(
            "user_api_user_created",
            directory_user_id=new_user.user_id,
            username=new_user.username,
        )
        return Success(value=new_user)

    async def _execute_request(
        self,
        *,
        method: str,
        path: str,
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[httpx.Response, UserApiError]:
        """Execute HTTP request, mapping transport errors to UserApiError."""
        url = f"{self._base_url}{path}"

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers={"Accept": "application/json"},
                    json=json_data,
                )
            return Success(value=response)

        except httpx.TimeoutException as e:
            self._logger.warning(
                "user_api_timeout",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=UserApiError(
                    code=ErrorCode.USER_API_UNAVAILABLE,
                    message="User API request timed out",
                    is_transient=True,
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                "user_api_connection_error",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=UserApiError(
                    code=ErrorCode.USER_API_UNAVAILABLE,
                    message=f"Failed to connect to User API: {e}",
                    is_transient=True,
                )
            )

    def _check_error_response(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Failure[UserApiError] | None:
        """Return a Failure for non-2xx responses, None otherwise."""
        status = response.status_code

        if 200 <= status < 300:
            return None

        if status >= 500:
            self._logger.warning(
                "user_api_server_error",
                operation=operation,
                status_code=status,
            )
            return Failure(
                error=UserApiError(
                    code=ErrorCode.USER_API_UNAVAILABLE,
                    message=f"User API server error: {status}",
                    status_code=status,
                    is_transient=True,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        self._logger.warning(
            "user_api_rejected",
            operation=operation,
            status_code=status,
        )
        return Failure(
            error=UserApiError(
                code=ErrorCode.USER_API_REJECTED,
                message=f"User API rejected the request: {status}",
                status_code=status,
                response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
            )
        )

    def _parse_json_object(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Result[dict[str, Any], UserApiError]:
        """Parse response as a JSON object.

        Returns:
            Success(dict): Parsed JSON object.
            Failure(UserApiError): On HTTP error, invalid JSON or non-object body.
        """
        error_result = self._check_error_response(response, operation)
        if error_result is not None:
            return error_result

        try:
            data = response.json()
        except ValueError as e:
            self._logger.error(
                "user_api_invalid_json",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=UserApiError(
                    code=ErrorCode.USER_API_INVALID_RESPONSE,
                    message="Invalid JSON response from User API",
                    status_code=response.status_code,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        if not isinstance(data, dict):
            self._logger.warning(
                "user_api_unexpected_format",
                operation=operation,
                data_type=type(data).__name__,
            )
            return Failure(
                error=UserApiError(
                    code=ErrorCode.USER_API_INVALID_RESPONSE,
                    message="Expected object response from User API",
                    status_code=response.status_code,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        return Success(value=data)
