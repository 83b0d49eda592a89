"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from testapi.domain.entities.user import User
from testapi.domain.enums import Application, UserType


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_by_id: Retrieve user by ID
        find_by_username: Retrieve user by username (case-insensitive)
        list_by_user_type: List users of a type for an application
        find_highest_number: Highest assigned number for a type/application
        save: Create new user
        delete: Delete user row
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_username(self, username: str) -> User | None:
        """Find user by username.

        Username comparison must be case-insensitive.

        Args:
            username: Username (case-insensitive).

        Returns:
            User if found, None otherwise.
        """
        ...

    async def list_by_user_type(
        self, user_type: UserType, application: Application
    ) -> list[User]:
        """List users of a type owned by an application.

        Args:
            user_type: Role category to filter by.
            application: Owning application to filter by.

        Returns:
            Matching users ordered by number then username (may be empty).
        """
        ...

    async def find_highest_number(
        self, user_type: UserType, application: Application
    ) -> int | None:
        """Find the highest assigned number for a type/application pair.

        Args:
            user_type: Role category.
            application: Owning application.

        Returns:
            Highest number, or None if no numbered user exists for the pair.
        """
        ...

    async def save(self, user: User) -> None:
        """Create new user in database.

        Args:
            user: User entity to persist.

        Raises:
            IntegrityError: If the username is already taken.
        """
        ...

    async def delete(self, user_id: UUID) -> bool:
        """Delete user row.

        Args:
            user_id: User's unique identifier.

        Returns:
            True if a row was deleted, False if no user had that id.
        """
        ...
