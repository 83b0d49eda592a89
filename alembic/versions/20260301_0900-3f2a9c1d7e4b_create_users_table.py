"""create_users_table

Revision ID: 3f2a9c1d7e4b
Revises:
Create Date: 2026-03-01 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7e4b"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users table."""
    op.create_table(
        "users",
        # Primary key and timestamp from BaseModel
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "username",
            sa.String(length=255),
            nullable=False,
            comment="Login name as supplied",
        ),
        sa.Column(
            "username_normalized",
            sa.String(length=255),
            nullable=False,
            comment="Case-folded username; lookup key",
        ),
        sa.Column("contact_email", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=255), nullable=False),
        sa.Column("last_name", sa.String(length=255), nullable=False),
        sa.Column("display_name", sa.String(length=255), nullable=False),
        sa.Column("user_type", sa.String(length=50), nullable=False),
        sa.Column("application", sa.String(length=50), nullable=False),
        sa.Column(
            "number",
            sa.Integer(),
            nullable=True,
            comment="Sequence number within (user_type, application)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index(
        "ix_users_username_normalized",
        "users",
        ["username_normalized"],
        unique=True,
    )
    op.create_index("ix_users_user_type", "users", ["user_type"], unique=False)
    op.create_index("ix_users_application", "users", ["application"], unique=False)


def downgrade() -> None:
    """Drop users table."""
    op.drop_index("ix_users_application", table_name="users")
    op.drop_index("ix_users_user_type", table_name="users")
    op.drop_index("ix_users_username_normalized", table_name="users")
    op.drop_table("users")
