"""Queries (CQRS read operations)."""

from testapi.application.queries.user_queries import (
    GetNextUserNumber,
    GetUserById,
    GetUserByUsername,
    ListUsersByUserType,
)

__all__ = [
    "GetNextUserNumber",
    "GetUserById",
    "GetUserByUsername",
    "ListUsersByUserType",
]
