"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Upstream errors (USER_API_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Resource errors
    USER_NOT_FOUND = "user_not_found"

    # Conflict errors
    USER_ALREADY_EXISTS = "user_already_exists"

    # Directory (User API) errors
    USER_API_UNAVAILABLE = "user_api_unavailable"
    USER_API_REJECTED = "user_api_rejected"
    USER_API_INVALID_RESPONSE = "user_api_invalid_response"
