"""User database model.

Synthetic users consumed by automated test suites. Rows are inserted and
deleted, never updated.

Uniqueness:
    - ix_users_username_normalized: unique index on the case-folded
      username, so usernames differing only in case (Unicode included)
      cannot both be stored
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from testapi.infrastructure.persistence.base import BaseModel


class User(BaseModel):
    """User model.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Timestamp when user was created (from BaseModel)
        username: Login name as supplied
        username_normalized: Case-folded username (unique)
        contact_email: Contact address
        first_name: Given name
        last_name: Family name
        display_name: Display name
        user_type: UserType wire value (e.g., "Judge")
        application: Application wire value (e.g., "VideoWeb")
        number: Sequence number within (user_type, application), nullable

    Indexes:
        - ix_users_username_normalized: unique (username_normalized)
        - ix_users_user_type / ix_users_application: list and numbering queries
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Login name as supplied",
    )

    username_normalized: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Case-folded username; lookup key",
    )

    contact_email: Mapped[str] = mapped_column(String(255), nullable=False)

    first_name: Mapped[str] = mapped_column(String(255), nullable=False)

    last_name: Mapped[str] = mapped_column(String(255), nullable=False)

    display_name: Mapped[str] = mapped_column(String(255), nullable=False)

    user_type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        index=True,
    )

    application: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        index=True,
    )

    number: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Sequence number within (user_type, application)",
    )

    def __repr__(self) -> str:
        return (
            f"<User(id={self.id}, username={self.username!r}, "
            f"user_type={self.user_type}, application={self.application})>"
        )
