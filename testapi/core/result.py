"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. Command handlers return a Result so the router
decides how a failure is surfaced over HTTP.

Usage:
    def delete(user_id: UUID) -> Result[UUID, NotFoundError]:
        if not exists(user_id):
            return Failure(error=NotFoundError(...))
        return Success(value=user_id)

    match result:
        case Success(value=user_id):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
