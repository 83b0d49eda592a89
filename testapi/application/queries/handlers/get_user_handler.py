"""Single-user query handlers.

Absence is a normal outcome for a read: handlers return None and the router
decides the HTTP status.

Architecture:
- Application layer handler (one repository read each)
- NO infrastructure imports (repository injected via protocol)
"""

from testapi.application.queries.user_queries import GetUserById, GetUserByUsername
from testapi.domain.entities import User
from testapi.domain.protocols import UserRepository


class GetUserByIdHandler:
    """Handler for GetUserById query."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: GetUserById) -> User | None:
        """Handle GetUserById query.

        Args:
            query: GetUserById query with user_id.

        Returns:
            User if found, None otherwise.
        """
        return await self._user_repo.find_by_id(query.user_id)


class GetUserByUsernameHandler:
    """Handler for GetUserByUsername query (case-insensitive)."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: GetUserByUsername) -> User | None:
        return await self._user_repo.find_by_username(query.username)
