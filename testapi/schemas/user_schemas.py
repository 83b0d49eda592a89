"""User request/response schemas.

Pydantic models for user API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

RESTful Endpoints:
    GET    /users/{user_id}              - Get user by id
    GET    /users/username/{username}    - Get user by username
    GET    /users?userType=&application= - List users of a type
    GET    /users/iterate?userType=&application= - Next free user number
    POST   /users                        - Create user
    POST   /users/aad                    - Create directory (AAD) user
    DELETE /users?userId=                - Delete user
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from testapi.domain.enums import Application, UserType


# =============================================================================
# User Details (shared)
# =============================================================================


class UserDetailsResponse(BaseModel):
    """Response schema for a single user.

    Used by GET /users/{user_id}, GET /users/username/{username}, as list
    item of GET /users and as the body of POST /users.
    """

    id: UUID = Field(..., description="User identifier")
    username: str = Field(..., description="Login name")
    contact_email: str = Field(..., description="Contact address")
    first_name: str = Field(..., description="Given name")
    last_name: str = Field(..., description="Family name")
    display_name: str = Field(..., description="Display name")
    number: int | None = Field(
        None,
        description="Sequence number within (user_type, application)",
    )
    user_type: UserType = Field(..., description="Role category")
    application: Application = Field(..., description="Owning application")
    created_at: datetime = Field(..., description="When the user was created")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "01928f6e-3b7a-7c8d-9e0f-1a2b3c4d5e6f",
                "username": "automation_judge_1@hearings.test",
                "contact_email": "automation_judge_1@test.com",
                "first_name": "Automation",
                "last_name": "Judge 1",
                "display_name": "Automation Judge 1",
                "number": 1,
                "user_type": "Judge",
                "application": "VideoWeb",
                "created_at": "2024-01-15T10:30:00Z",
            }
        }
    )


# =============================================================================
# Create User
# =============================================================================


class CreateUserRequest(BaseModel):
    """Request schema for user creation.

    POST /users
    """

    username: str = Field(..., min_length=1, max_length=255, description="Login name")
    contact_email: str = Field(
        ..., min_length=3, max_length=255, description="Contact address"
    )
    first_name: str = Field(..., min_length=1, max_length=255, description="Given name")
    last_name: str = Field(..., min_length=1, max_length=255, description="Family name")
    display_name: str = Field(
        ..., min_length=1, max_length=255, description="Display name"
    )
    number: int | None = Field(
        None,
        ge=1,
        description="Sequence number (see GET /users/iterate)",
    )
    user_type: UserType = Field(..., description="Role category")
    application: Application = Field(..., description="Owning application")


# =============================================================================
# User Number
# =============================================================================


class IteratedUserNumberResponse(BaseModel):
    """Response schema for the next free user number.

    GET /users/iterate
    """

    number: int = Field(..., description="Next free number for the pair", examples=[4])


# =============================================================================
# Directory (AAD) User
# =============================================================================


class CreateADUserRequest(BaseModel):
    """Request schema for directory (AAD) user creation.

    POST /users/aad
    """

    title: str = Field(..., min_length=1, description="Honorific (Mr, Mrs, ...)")
    first_name: str = Field(..., min_length=1, max_length=255)
    middle_names: str | None = Field(None, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    display_name: str = Field(..., min_length=1, max_length=255)
    username: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Requested username; the directory assigns the final one",
    )
    contact_email: str = Field(
        ...,
        min_length=3,
        max_length=255,
        description="Contact address, registered as the recovery email",
    )
    case_role_name: str = Field(..., min_length=1, description="Case role")
    hearing_role_name: str = Field(..., min_length=1, description="Hearing role")
    reference: str | None = None
    representee: str | None = None
    organisation_name: str | None = None
    telephone_number: str | None = None
    user_type: UserType = Field(
        UserType.INDIVIDUAL,
        description="Role category of the local record",
    )
    application: Application = Field(
        Application.TEST_API,
        description="Owning application of the local record",
    )


class NewUserResponse(BaseModel):
    """Response schema for a created directory account.

    POST /users/aad
    """

    user_id: str = Field(..., description="Directory object id")
    username: str = Field(..., description="Sign-in name assigned by the directory")
    one_time_password: str = Field(..., description="Initial password")
