"""User domain entity.

Pure business logic, no framework dependencies.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from testapi.domain.enums import Application, UserType


@dataclass
class User:
    """Synthetic user handed to automated front-end test suites.

    Business Rules:
        - Username is unique across the store (case-insensitive)
        - Number is unique per (user_type, application) when present
        - Users are created and deleted, never updated in place

    Attributes:
        id: Unique user identifier
        username: Login name (unique, case-insensitive)
        contact_email: Address the test suites read notifications from
        first_name: Given name
        last_name: Family name
        display_name: Name shown in the front-end
        user_type: Role category (Judge, Individual, ...)
        application: Owning application
        number: Sequence number within (user_type, application), None if unnumbered
        created_at: Timestamp when user was created

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     username="automation_judge_1@hearings.test",
        ...     contact_email="automation_judge_1@test.com",
        ...     first_name="Automation",
        ...     last_name="Judge 1",
        ...     display_name="Automation Judge 1",
        ...     user_type=UserType.JUDGE,
        ...     application=Application.VIDEO_WEB,
        ...     number=1,
        ...     created_at=datetime.now(UTC),
        ... )
    """

    id: UUID
    username: str
    contact_email: str
    first_name: str
    last_name: str
    display_name: str
    user_type: UserType
    application: Application
    number: int | None
    created_at: datetime


def normalize_username(username: str) -> str:
    """Fold a username to the form used for uniqueness and lookup.

    Unicode case folding, so "Élodie" and "ÉLODIE" collide the same way
    "Judge" and "JUDGE" do.

    Args:
        username: Username as supplied by a caller.

    Returns:
        str: Case-folded username.
    """
    return username.casefold()
