"""Delete user handler."""

from uuid import UUID

from testapi.application.commands.user_commands import DeleteUser
from testapi.core.enums import ErrorCode
from testapi.core.errors import NotFoundError
from testapi.core.result import Failure, Result, Success
from testapi.domain.protocols import LoggerProtocol, UserRepository


class DeleteUserHandler:
    """Handler for DeleteUser command (hard delete)."""

    def __init__(
        self,
        user_repo: UserRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, cmd: DeleteUser) -> Result[UUID, NotFoundError]:
        """Handle delete user command.

        Args:
            cmd: DeleteUser command with user_id.

        Returns:
            Success(user_id) when the row was deleted.
            Failure(NotFoundError) when no user has that id.
        """
        deleted = await self._user_repo.delete(cmd.user_id)
        if not deleted:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message=f"User {cmd.user_id} not found",
                    resource_type="User",
                    resource_id=str(cmd.user_id),
                )
            )

        self._logger.info("user_deleted", user_id=str(cmd.user_id))
        return Success(value=cmd.user_id)
