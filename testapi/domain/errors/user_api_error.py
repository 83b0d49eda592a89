"""User API (directory) error types.

These errors are part of the UserApiProtocol contract - they define the
failure cases a directory client implementation can return.

Architecture:
- Domain layer errors (part of protocol contract)
- Inherit from DomainError (core layer)
- Used in Result types (railway-oriented programming)
- Never retried by the service

Usage:
    from testapi.domain.errors import UserApiError

    return Failure(error=UserApiError(
        code=ErrorCode.USER_API_UNAVAILABLE,
        message="User API request timed out",
        is_transient=True,
    ))
"""

from dataclasses import dataclass

from testapi.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class UserApiError(DomainError):
    """Directory (User API) call failed.

    Raised when:
    - The request timed out or the connection failed
    - The User API answered with a non-success status
    - The response body was not the expected JSON object

    Attributes:
        status_code: HTTP status returned by the User API (None if no response).
        is_transient: Whether a later retry by the caller could succeed.
        response_body: Truncated upstream body for debugging.
    """

    status_code: int | None = None
    is_transient: bool = False
    response_body: str | None = None
