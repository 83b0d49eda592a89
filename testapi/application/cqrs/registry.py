"""CQRS Registry - Single Source of Truth for Commands and Queries.

Used for:
- Dispatcher construction (one handler per command/query class)
- Startup validation (duplicates, missing handle(), unresolvable dependencies)
- Tests that catch drift between commands/queries and handlers

Adding new commands/queries:
1. Define the dataclass in user_commands.py / user_queries.py
2. Create handler class in handlers/ directory
3. Add entry to COMMAND_REGISTRY or QUERY_REGISTRY below
"""

from testapi.application.cqrs.metadata import (
    CommandMetadata,
    QueryMetadata,
)

# ═══════════════════════════════════════════════════════════════════════════
# Commands and handlers
# ═══════════════════════════════════════════════════════════════════════════
from testapi.application.commands.user_commands import (
    CreateADUser,
    CreateUser,
    DeleteUser,
)
from testapi.application.commands.handlers.create_ad_user_handler import (
    CreateADUserHandler,
)
from testapi.application.commands.handlers.create_user_handler import (
    CreateUserHandler,
)
from testapi.application.commands.handlers.delete_user_handler import (
    DeleteUserHandler,
)

# ═══════════════════════════════════════════════════════════════════════════
# Queries and handlers
# ═══════════════════════════════════════════════════════════════════════════
from testapi.application.queries.user_queries import (
    GetNextUserNumber,
    GetUserById,
    GetUserByUsername,
    ListUsersByUserType,
)
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


COMMAND_REGISTRY: list[CommandMetadata] = [
    CommandMetadata(
        command_class=CreateUser,
        handler_class=CreateUserHandler,
        description="Create a test user record",
    ),
    CommandMetadata(
        command_class=DeleteUser,
        handler_class=DeleteUserHandler,
        description="Delete a test user by id",
    ),
    CommandMetadata(
        command_class=CreateADUser,
        handler_class=CreateADUserHandler,
        description="Create a directory account via the User API and record it",
    ),
]


QUERY_REGISTRY: list[QueryMetadata] = [
    QueryMetadata(
        query_class=GetUserById,
        handler_class=GetUserByIdHandler,
        description="Get a single user by id",
    ),
    QueryMetadata(
        query_class=GetUserByUsername,
        handler_class=GetUserByUsernameHandler,
        description="Get a single user by username (case-insensitive)",
    ),
    QueryMetadata(
        query_class=ListUsersByUserType,
        handler_class=ListUsersByUserTypeHandler,
        description="List users of a type owned by an application",
    ),
    QueryMetadata(
        query_class=GetNextUserNumber,
        handler_class=GetNextUserNumberHandler,
        description="Next free user number for a type/application pair",
    ),
]
