"""Domain errors.

Exports:
    UserApiError: Directory (User API) failure returned in Result types
    UserAlreadyExistsError: Raised when creating a user whose username is taken
"""

from testapi.domain.errors.user_api_error import UserApiError
from testapi.domain.errors.user_errors import UserAlreadyExistsError

__all__ = [
    "UserApiError",
    "UserAlreadyExistsError",
]
