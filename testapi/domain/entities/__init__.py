"""Domain entities."""

from testapi.domain.entities.allocation import Allocation
from testapi.domain.entities.directory_user import DirectoryProfile, NewDirectoryUser
from testapi.domain.entities.user import User, normalize_username

__all__ = [
    "Allocation",
    "DirectoryProfile",
    "NewDirectoryUser",
    "User",
    "normalize_username",
]
