"""Common error classes used across all layers.

Error Types:
- NotFoundError: Resource not found
- ConflictError: Resource conflicts (duplicate usernames)

Usage:
    from testapi.core.errors import NotFoundError
    from testapi.core.enums import ErrorCode
    from testapi.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.USER_NOT_FOUND,
        message="User not found",
        resource_type="User",
        resource_id=str(user_id),
    ))
"""

from dataclasses import dataclass

from testapi.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (User, Allocation, etc.).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate username).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (username).
    """

    resource_type: str
    conflicting_field: str | None = None
