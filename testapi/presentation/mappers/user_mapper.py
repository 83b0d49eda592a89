"""User entity to response mapper."""

from testapi.domain.entities import User
from testapi.schemas.user_schemas import UserDetailsResponse


def map_user_to_details_response(user: User) -> UserDetailsResponse:
    """Map a User entity to its details response.

    Args:
        user: Domain user.

    Returns:
        UserDetailsResponse with every field copied from the entity.
    """
    return UserDetailsResponse(
        id=user.id,
        username=user.username,
        contact_email=user.contact_email,
        first_name=user.first_name,
        last_name=user.last_name,
        display_name=user.display_name,
        number=user.number,
        user_type=user.user_type,
        application=user.application,
        created_at=user.created_at,
    )
