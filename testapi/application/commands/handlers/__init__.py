"""Command handlers."""

from testapi.application.commands.handlers.create_ad_user_handler import (
    CreateADUserHandler,
)
from testapi.application.commands.handlers.create_user_handler import (
    CreateUserHandler,
)
from testapi.application.commands.handlers.delete_user_handler import (
    DeleteUserHandler,
)

__all__ = [
    "CreateADUserHandler",
    "CreateUserHandler",
    "DeleteUserHandler",
]
