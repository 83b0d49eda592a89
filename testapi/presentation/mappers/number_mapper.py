"""User number to response mapper."""

from testapi.schemas.user_schemas import IteratedUserNumberResponse


def map_number_to_response(number: int) -> IteratedUserNumberResponse:
    return IteratedUserNumberResponse(number=number)
