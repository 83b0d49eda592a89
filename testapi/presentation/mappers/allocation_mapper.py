"""Allocation entity to response mapper."""

from testapi.domain.entities import Allocation
from testapi.schemas.allocation_schemas import AllocationDetailsResponse


def map_allocation_to_details_response(
    allocation: Allocation,
) -> AllocationDetailsResponse:
    """Map an Allocation to its details response.

    The wrapped user is not included; clients fetch it by user_id.
    """
    return AllocationDetailsResponse(
        id=allocation.id,
        user_id=allocation.user_id,
        username=allocation.username,
        allocated=allocation.allocated,
        expires_at=allocation.expires_at,
    )
