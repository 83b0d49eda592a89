"""Container module - Centralized dependency injection.

- infrastructure: app-scoped singletons (database, logger, User API client)
  and the request-scoped database session
- handler_factory: handler auto-wiring and dispatcher dependencies

    from testapi.core.container import get_query_dispatcher, get_logger
"""

from testapi.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_user_api_client,
)
from testapi.core.container.handler_factory import (
    analyze_handler_dependencies,
    build_command_dispatcher,
    build_query_dispatcher,
    check_handler_dependencies,
    create_handler,
    get_command_dispatcher,
    get_query_dispatcher,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    "get_user_api_client",
    # Handlers and dispatchers
    "analyze_handler_dependencies",
    "build_command_dispatcher",
    "build_query_dispatcher",
    "check_handler_dependencies",
    "create_handler",
    "get_command_dispatcher",
    "get_query_dispatcher",
]
