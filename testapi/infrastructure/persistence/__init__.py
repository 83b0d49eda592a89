"""Persistence layer - SQLAlchemy models, database and repositories."""

from testapi.infrastructure.persistence.base import BaseModel
from testapi.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "Database"]
