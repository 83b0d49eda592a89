"""Commands (CQRS write operations)."""

from testapi.application.commands.user_commands import (
    CreateADUser,
    CreateUser,
    DeleteUser,
)

__all__ = [
    "CreateADUser",
    "CreateUser",
    "DeleteUser",
]
