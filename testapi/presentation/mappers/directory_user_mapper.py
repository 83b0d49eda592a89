"""Directory account to response mapper."""

from testapi.domain.entities import NewDirectoryUser
from testapi.schemas.user_schemas import NewUserResponse


def map_directory_user_to_response(new_user: NewDirectoryUser) -> NewUserResponse:
    """Map a created directory account to its response.

    The one-time password is part of the response; callers need it to sign in.
    """
    return NewUserResponse(
        user_id=new_user.user_id,
        username=new_user.username,
        one_time_password=new_user.one_time_password,
    )
