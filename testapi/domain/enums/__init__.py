"""Domain enums for business logic.

Available Enums:
    - UserType: Role category of a test user (Judge, Individual, ...)
    - Application: Application that owns a test user (VideoWeb, AdminWeb, ...)
"""

from testapi.domain.enums.application import Application
from testapi.domain.enums.user_type import UserType

__all__ = [
    "Application",
    "UserType",
]
