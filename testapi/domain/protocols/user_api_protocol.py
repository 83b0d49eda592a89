"""UserApiProtocol - port for the directory (User API) service."""

from typing import Protocol

from testapi.core.result import Result
from testapi.domain.entities.directory_user import DirectoryProfile, NewDirectoryUser
from testapi.domain.errors.user_api_error import UserApiError


class UserApiProtocol(Protocol):
    """Directory client that creates accounts in the identity provider."""

    async def create_user(
        self, profile: DirectoryProfile
    ) -> Result[NewDirectoryUser, UserApiError]:
        """Create a directory account.

        Args:
            profile: Names and recovery email of the new account.

        Returns:
            Success(NewDirectoryUser): Account created.
            Failure(UserApiError): Upstream failure (never retried).
        """
        ...
