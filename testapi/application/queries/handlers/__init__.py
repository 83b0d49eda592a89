"""Query handlers."""

from testapi.application.queries.handlers.get_next_user_number_handler import (
    GetNextUserNumberHandler,
)
from testapi.application.queries.handlers.get_user_handler import (
    GetUserByIdHandler,
    GetUserByUsernameHandler,
)
from testapi.application.queries.handlers.list_users_handler import (
    ListUsersByUserTypeHandler,
)

__all__ = [
    "GetNextUserNumberHandler",
    "GetUserByIdHandler",
    "GetUserByUsernameHandler",
    "ListUsersByUserTypeHandler",
]
