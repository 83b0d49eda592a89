"""Pytest configuration shared by all test suites.

- Forces the testing environment before any testapi module reads settings
- Provides a User entity factory
- Provides an in-memory SQLite Database (aiosqlite) with the schema created
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from collections.abc import AsyncGenerator, Callable  # noqa: E402
from datetime import UTC, datetime  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from testapi.domain.entities import User  # noqa: E402
from testapi.domain.enums import Application, UserType  # noqa: E402
from testapi.infrastructure.persistence.database import Database  # noqa: E402

SQLITE_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


def create_user(**overrides: Any) -> User:
    """Build a User entity with sensible defaults.

    Args:
        **overrides: Field values to replace the defaults.

    Returns:
        User entity (not persisted).
    """
    number = overrides.pop("number", 1)
    user_type = overrides.pop("user_type", UserType.JUDGE)
    defaults: dict[str, Any] = {
        "id": uuid7(),
        "username": f"automation_{user_type.value.lower()}_{number}@hearings.test",
        "contact_email": f"automation_{user_type.value.lower()}_{number}@test.com",
        "first_name": "Automation",
        "last_name": f"{user_type.value} {number}",
        "display_name": f"Automation {user_type.value} {number}",
        "user_type": user_type,
        "application": Application.VIDEO_WEB,
        "number": number,
        "created_at": datetime.now(UTC),
    }
    defaults.update(overrides)
    return User(**defaults)


@pytest.fixture
def user_factory() -> Callable[..., User]:
    """Factory fixture for User entities."""
    return create_user


@pytest_asyncio.fixture
async def database() -> AsyncGenerator[Database, None]:
    """In-memory SQLite database with all tables created."""
    db = Database(SQLITE_MEMORY_URL)
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()
