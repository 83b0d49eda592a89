"""ListUsersByUserType query handler."""

from testapi.application.queries.user_queries import ListUsersByUserType
from testapi.domain.entities import User
from testapi.domain.protocols import UserRepository


class ListUsersByUserTypeHandler:
    """Handler for ListUsersByUserType query.

    Dependencies (injected via constructor):
        - UserRepository: For user retrieval
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: ListUsersByUserType) -> list[User]:
        """Handle ListUsersByUserType query.

        Args:
            query: ListUsersByUserType query with user_type and application.

        Returns:
            Matching users (empty list if none).
        """
        return await self._user_repo.list_by_user_type(
            query.user_type, query.application
        )
