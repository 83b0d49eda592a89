"""Create user handler.

Flow:
1. Build User entity (new id, creation timestamp)
2. Insert it
3. Duplicate username rejected by the store -> Failure(ConflictError)
4. Return Success(user_id)

Architecture:
- Repository injected via protocol
- IntegrityError is part of UserRepository.save() contract
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from uuid_extensions import uuid7

from testapi.application.commands.user_commands import CreateUser
from testapi.core.enums import ErrorCode
from testapi.core.errors import ConflictError
from testapi.core.result import Failure, Result, Success
from testapi.domain.entities import User
from testapi.domain.protocols import LoggerProtocol, UserRepository


class CreateUserHandler:
    """Handler for CreateUser command.

    The router checks the username is free before dispatching. Two requests
    can still pass that check together; the unique index on the case-folded
    username rejects the second insert, reported here as a conflict.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize create user handler with dependencies.

        Args:
            user_repo: User repository for persistence.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, cmd: CreateUser) -> Result[UUID, ConflictError]:
        """Handle create user command.

        Args:
            cmd: CreateUser command.

        Returns:
            Success(user_id) when the user was stored.
            Failure(ConflictError) when the username is already taken.
        """
        user = User(
            id=uuid7(),
            username=cmd.username,
            contact_email=cmd.contact_email,
            first_name=cmd.first_name,
            last_name=cmd.last_name,
            display_name=cmd.display_name,
            user_type=cmd.user_type,
            application=cmd.application,
            number=cmd.number,
            created_at=datetime.now(UTC),
        )

        try:
            await self._user_repo.save(user)
        except IntegrityError:
            self._logger.warning(
                "user_create_conflict",
                username=cmd.username,
                application=cmd.application.value,
            )
            return Failure(
                error=ConflictError(
                    code=ErrorCode.USER_ALREADY_EXISTS,
                    message=f"User with username '{cmd.username}' already exists",
                    resource_type="User",
                    conflicting_field="username",
                )
            )

        self._logger.info(
            "user_created",
            user_id=str(user.id),
            username=user.username,
            user_type=user.user_type.value,
            application=user.application.value,
        )
        return Success(value=user.id)
