"""SQLAlchemy models.

Importing this package registers every table on BaseModel.metadata.
"""

from testapi.infrastructure.persistence.models.user import User

__all__ = ["User"]
