"""HTTP request/response schemas (Pydantic)."""

from testapi.schemas.allocation_schemas import AllocationDetailsResponse
from testapi.schemas.user_schemas import (
    CreateADUserRequest,
    CreateUserRequest,
    IteratedUserNumberResponse,
    NewUserResponse,
    UserDetailsResponse,
)

__all__ = [
    "AllocationDetailsResponse",
    "CreateADUserRequest",
    "CreateUserRequest",
    "IteratedUserNumberResponse",
    "NewUserResponse",
    "UserDetailsResponse",
]
