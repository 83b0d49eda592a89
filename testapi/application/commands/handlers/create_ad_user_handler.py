"""Create directory (AAD) user handler.

Flow:
1. Ask the User API to create the account (names + contact email)
2. Upstream failure -> Failure(UserApiError), nothing stored
3. Record the account locally under the username the directory assigned
4. Return Success(NewDirectoryUser)

The one-time password is returned to the caller and never logged.
"""

from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError
from uuid_extensions import uuid7

from testapi.application.commands.user_commands import CreateADUser
from testapi.core.enums import ErrorCode
from testapi.core.errors import ConflictError, DomainError
from testapi.core.result import Failure, Result, Success
from testapi.domain.entities import DirectoryProfile, NewDirectoryUser, User
from testapi.domain.protocols import LoggerProtocol, UserApiProtocol, UserRepository


class CreateADUserHandler:
    """Handler for CreateADUser command.

    Dependencies (injected via constructor):
        - UserApiProtocol: Directory client
        - UserRepository: Local record of the created account
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        user_api: UserApiProtocol,
        user_repo: UserRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._user_api = user_api
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, cmd: CreateADUser) -> Result[NewDirectoryUser, DomainError]:
        """Handle create directory user command.

        Args:
            cmd: CreateADUser command.

        Returns:
            Success(NewDirectoryUser): Account created and recorded.
            Failure(UserApiError): The User API call failed.
            Failure(ConflictError): The assigned username is already recorded.
        """
        profile = DirectoryProfile(
            first_name=cmd.first_name,
            last_name=cmd.last_name,
            recovery_email=cmd.contact_email,
        )

        result = await self._user_api.create_user(profile)
        match result:
            case Failure(error=error):
                self._logger.warning(
                    "user_api_request_failed",
                    requested_username=cmd.username,
                    error_code=error.code.value,
                    status_code=error.status_code,
                )
                return Failure(error=error)
            case Success(value=new_user):
                pass

        user = User(
            id=uuid7(),
            username=new_user.username,
            contact_email=cmd.contact_email,
            first_name=cmd.first_name,
            last_name=cmd.last_name,
            display_name=cmd.display_name,
            user_type=cmd.user_type,
            application=cmd.application,
            number=None,
            created_at=datetime.now(UTC),
        )

        try:
            await self._user_repo.save(user)
        except IntegrityError:
            self._logger.warning(
                "ad_user_record_conflict",
                username=new_user.username,
                directory_user_id=new_user.user_id,
            )
            return Failure(
                error=ConflictError(
                    code=ErrorCode.USER_ALREADY_EXISTS,
                    message=f"User with username '{new_user.username}' already exists",
                    resource_type="User",
                    conflicting_field="username",
                )
            )

        self._logger.info(
            "ad_user_created",
            user_id=str(user.id),
            directory_user_id=new_user.user_id,
            username=new_user.username,
        )
        return Success(value=new_user)
