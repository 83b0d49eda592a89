"""Repository implementations (adapters for domain repository protocols)."""

from testapi.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = ["UserRepository"]
