"""Unit tests for user command handlers.

Tests cover:
- CreateUserHandler: success, IntegrityError -> Conflict
- CreateADUserHandler: success, upstream failure, local conflict
- DeleteUserHandler: success, absent id -> NotFound

Architecture:
- Unit tests for application handlers (mocked protocols)
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest
from sqlalchemy.exc import IntegrityError
from uuid_extensions import uuid7

from testapi.application.commands.handlers import (
    CreateADUserHandler,
    CreateUserHandler,
    DeleteUserHandler,
)
from testapi.application.commands.user_commands import (
    CreateADUser,
    CreateUser,
    DeleteUser,
)
from testapi.core.enums import ErrorCode
from testapi.core.errors import ConflictError, NotFoundError
from testapi.core.result import Failure, Success
from testapi.domain.entities import DirectoryProfile, NewDirectoryUser, User
from testapi.domain.enums import Application, UserType
from testapi.domain.errors import UserApiError


def _integrity_error() -> IntegrityError:
    return IntegrityError("INSERT INTO users ...", {}, Exception("unique violation"))


def _create_user_command(**overrides) -> CreateUser:
    values = {
        "username": "automation_judge_1@hearings.test",
        "contact_email": "automation_judge_1@test.com",
        "first_name": "Automation",
        "last_name": "Judge 1",
        "display_name": "Automation Judge 1",
        "number": 1,
        "user_type": UserType.JUDGE,
        "application": Application.VIDEO_WEB,
    }
    values.update(overrides)
    return CreateUser(**values)


def _create_ad_user_command() -> CreateADUser:
    return CreateADUser(
        title="Mrs",
        first_name="Automation",
        last_name="Individual 1",
        display_name="Automation Individual 1",
        username="automation_individual_1@hearings.test",
        contact_email="automation_individual_1@test.com",
        case_role_name="Applicant",
        hearing_role_name="Litigant in person",
    )


@pytest.mark.unit
class TestCreateUserHandler:
    """Test user creation."""

    async def test_success_saves_user_and_returns_id(self):
        mock_repo = AsyncMock()
        handler = CreateUserHandler(user_repo=mock_repo, logger=MagicMock())
        command = _create_user_command()

        result = await handler.handle(command)

        assert isinstance(result, Success)
        assert isinstance(result.value, UUID)
        mock_repo.save.assert_called_once()
        saved: User = mock_repo.save.call_args.args[0]
        assert saved.id == result.value
        assert saved.username == command.username
        assert saved.contact_email == command.contact_email
        assert saved.user_type is UserType.JUDGE
        assert saved.application is Application.VIDEO_WEB
        assert saved.number == 1
        assert saved.created_at.tzinfo is not None

    async def test_duplicate_username_returns_conflict(self):
        mock_repo = AsyncMock()
        mock_repo.save.side_effect = _integrity_error()
        handler = CreateUserHandler(user_repo=mock_repo, logger=MagicMock())

        result = await handler.handle(_create_user_command())

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.USER_ALREADY_EXISTS
        assert result.error.conflicting_field == "username"

    async def test_each_create_gets_a_new_id(self):
        mock_repo = AsyncMock()
        handler = CreateUserHandler(user_repo=mock_repo, logger=MagicMock())

        first = await handler.handle(_create_user_command(username="a@hearings.test"))
        second = await handler.handle(_create_user_command(username="b@hearings.test"))

        assert isinstance(first, Success) and isinstance(second, Success)
        assert first.value != second.value


@pytest.mark.unit
class TestCreateADUserHandler:
    """Test directory user creation."""

    async def test_success_creates_directory_account_and_local_record(self):
        new_user = NewDirectoryUser(
            user_id="0f3d9a6e-aad-object-id",
            username="automation.individual1@hmcts.test",
            one_time_password="Xy7!temporary",
        )
        mock_api = AsyncMock()
        mock_api.create_user.return_value = Success(value=new_user)
        mock_repo = AsyncMock()
        handler = CreateADUserHandler(
            user_api=mock_api, user_repo=mock_repo, logger=MagicMock()
        )

        result = await handler.handle(_create_ad_user_command())

        assert result == Success(value=new_user)
        mock_api.create_user.assert_called_once_with(
            DirectoryProfile(
                first_name="Automation",
                last_name="Individual 1",
                recovery_email="automation_individual_1@test.com",
            )
        )
        saved: User = mock_repo.save.call_args.args[0]
        assert saved.username == new_user.username
        assert saved.user_type is UserType.INDIVIDUAL
        assert saved.application is Application.TEST_API
        assert saved.number is None

    async def test_upstream_failure_is_returned_and_nothing_saved(self):
        api_error = UserApiError(
            code=ErrorCode.USER_API_UNAVAILABLE,
            message="User API request timed out",
            is_transient=True,
        )
        mock_api = AsyncMock()
        mock_api.create_user.return_value = Failure(error=api_error)
        mock_repo = AsyncMock()
        handler = CreateADUserHandler(
            user_api=mock_api, user_repo=mock_repo, logger=MagicMock()
        )

        result = await handler.handle(_create_ad_user_command())

        assert result == Failure(error=api_error)
        mock_repo.save.assert_not_called()

    async def test_local_conflict_returns_conflict(self):
        mock_api = AsyncMock()
        mock_api.create_user.return_value = Success(
            value=NewDirectoryUser(
                user_id="id", username="taken@hmcts.test", one_time_password="pw"
            )
        )
        mock_repo = AsyncMock()
        mock_repo.save.side_effect = _integrity_error()
        handler = CreateADUserHandler(
            user_api=mock_api, user_repo=mock_repo, logger=MagicMock()
        )

        result = await handler.handle(_create_ad_user_command())

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)

    async def test_one_time_password_is_never_logged(self):
        mock_api = AsyncMock()
        mock_api.create_user.return_value = Success(
            value=NewDirectoryUser(
                user_id="id", username="u@hmcts.test", one_time_password="SECRET-OTP"
            )
        )
        mock_logger = MagicMock()
        handler = CreateADUserHandler(
            user_api=mock_api, user_repo=AsyncMock(), logger=mock_logger
        )

        await handler.handle(_create_ad_user_command())

        for method in (mock_logger.debug, mock_logger.info, mock_logger.warning):
            for call in method.call_args_list:
                assert "SECRET-OTP" not in repr(call)


@pytest.mark.unit
class TestDeleteUserHandler:
    """Test user deletion."""

    async def test_success_returns_user_id(self):
        user_id = uuid7()
        mock_repo = AsyncMock()
        mock_repo.delete.return_value = True
        handler = DeleteUserHandler(user_repo=mock_repo, logger=MagicMock())

        result = await handler.handle(DeleteUser(user_id=user_id))

        assert result == Success(value=user_id)
        mock_repo.delete.assert_called_once_with(user_id)

    async def test_absent_user_returns_not_found(self):
        user_id = uuid7()
        mock_repo = AsyncMock()
        mock_repo.delete.return_value = False
        handler = DeleteUserHandler(user_repo=mock_repo, logger=MagicMock())

        result = await handler.handle(DeleteUser(user_id=user_id))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.USER_NOT_FOUND
        assert result.error.resource_id == str(user_id)
