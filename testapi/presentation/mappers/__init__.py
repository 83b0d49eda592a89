"""Mappers from domain values to response schemas.

Pure, total functions; calling one twice on the same input gives equal
responses.
"""

from testapi.presentation.mappers.allocation_mapper import (
    map_allocation_to_details_response,
)
from testapi.presentation.mappers.directory_user_mapper import (
    map_directory_user_to_response,
)
from testapi.presentation.mappers.number_mapper import map_number_to_response
from testapi.presentation.mappers.user_mapper import map_user_to_details_response

__all__ = [
    "map_allocation_to_details_response",
    "map_directory_user_to_response",
    "map_number_to_response",
    "map_user_to_details_response",
]
