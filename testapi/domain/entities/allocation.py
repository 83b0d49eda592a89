"""Allocation domain entity.

An allocation is a user combined with the assignment context that reserves
it for one test run (hearing/conference).
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from uuid_extensions import uuid7

from testapi.domain.entities.user import User


@dataclass
class Allocation:
    """User reserved (or reservable) for a test run.

    Attributes:
        id: Unique allocation identifier
        user_id: Allocated user's id
        username: Allocated user's username
        allocated: Whether the user is currently reserved
        expires_at: When the reservation lapses (None while unallocated)
        user: The allocated user
    """

    id: UUID
    user_id: UUID
    username: str
    allocated: bool
    expires_at: datetime | None
    user: User

    @classmethod
    def for_user(cls, user: User) -> "Allocation":
        """Build an unallocated allocation wrapping a user.

        Args:
            user: User to wrap.

        Returns:
            Allocation: New allocation, not reserved, no expiry.
        """
        return cls(
            id=uuid7(),
            user_id=user.id,
            username=user.username,
            allocated=False,
            expires_at=None,
            user=user,
        )
