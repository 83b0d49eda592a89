"""User queries (CQRS read operations).

Queries request data without side effects. They carry lookup keys only.
"""

from dataclasses import dataclass
from uuid import UUID

from testapi.domain.enums import Application, UserType


@dataclass(frozen=True, kw_only=True)
class GetUserById:
    """Get a single user by id.

    Attributes:
        user_id: User identifier.
    """

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetUserByUsername:
    """Get a single user by username (case-insensitive).

    Attributes:
        username: Username to look up.
    """

    username: str


@dataclass(frozen=True, kw_only=True)
class ListUsersByUserType:
    """List users of a type owned by an application.

    Attributes:
        user_type: Role category.
        application: Owning application.

    Example:
        >>> query = ListUsersByUserType(
        ...     user_type=UserType.JUDGE,
        ...     application=Application.VIDEO_WEB,
        ... )
        >>> users = await handler.handle(query)
    """

    user_type: UserType
    application: Application


@dataclass(frozen=True, kw_only=True)
class GetNextUserNumber:
    """Get the next free user number for a type/application pair.

    Attributes:
        user_type: Role category.
        application: Owning application.
    """

    user_type: UserType
    application: Application
