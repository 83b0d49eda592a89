"""Infrastructure dependency factories.

Application-scoped singletons:
- Database (PostgreSQL via asyncpg)
- Logging (structlog console adapter)
- User API client (httpx)

Request-scoped:
- Database session
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from testapi.core.config import settings
from testapi.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from testapi.domain.protocols.logger_protocol import LoggerProtocol
    from testapi.domain.protocols.user_api_protocol import UserApiProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development/production: ConsoleAdapter (human-readable in development)
    - testing/ci/production: JSON output

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from testapi.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = not settings.is_development
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


@lru_cache()
def get_user_api_client() -> "UserApiProtocol":
    """Get User API client singleton (app-scoped).

    Returns:
        UserApiProtocol: httpx-backed directory client.
    """
    from testapi.infrastructure.clients.user_api_client import UserApiClient

    return UserApiClient(
        base_url=settings.user_api_url,
        timeout=settings.user_api_timeout,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on success, rolls back on exception, always closes.

    Yields:
        Database session for request duration.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
