"""GetNextUserNumber query handler.

Numbers are allocated as highest-assigned + 1 within a (user_type,
application) pair. The result is advisory: nothing is reserved, so two
callers asking at the same time receive the same number.
"""

from testapi.application.queries.user_queries import GetNextUserNumber
from testapi.core.constants import FIRST_USER_NUMBER
from testapi.domain.protocols import UserRepository


class GetNextUserNumberHandler:
    """Handler for GetNextUserNumber query."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: GetNextUserNumber) -> int:
        """Handle GetNextUserNumber query.

        Args:
            query: GetNextUserNumber query with user_type and application.

        Returns:
            Highest assigned number plus one, or FIRST_USER_NUMBER when the
            pair has no numbered users.
        """
        highest = await self._user_repo.find_highest_number(
            query.user_type, query.application
        )
        if highest is None:
            return FIRST_USER_NUMBER
        return max(highest + 1, FIRST_USER_NUMBER)
