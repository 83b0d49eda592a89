"""Unit tests for response mappers.

Tests cover:
- map_user_to_details_response copies every field
- map_allocation_to_details_response leaves the nested user out
- map_number_to_response / map_directory_user_to_response
- Mapping the same value twice gives equal responses
"""

import pytest

from testapi.domain.entities import Allocation, NewDirectoryUser
from testapi.domain.enums import Application, UserType
from testapi.presentation.mappers import (
    map_allocation_to_details_response,
    map_directory_user_to_response,
    map_number_to_response,
    map_user_to_details_response,
)
from tests.conftest import create_user


@pytest.mark.unit
class TestUserMapper:
    """Test user details mapping."""

    def test_copies_every_field(self):
        user = create_user(
            user_type=UserType.PANEL_MEMBER, application=Application.ADMIN_WEB
        )

        response = map_user_to_details_response(user)

        assert response.id == user.id
        assert response.username == user.username
        assert response.contact_email == user.contact_email
        assert response.first_name == user.first_name
        assert response.last_name == user.last_name
        assert response.display_name == user.display_name
        assert response.number == user.number
        assert response.user_type is UserType.PANEL_MEMBER
        assert response.application is Application.ADMIN_WEB
        assert response.created_at == user.created_at

    def test_serializes_enums_as_wire_values(self):
        response = map_user_to_details_response(create_user())

        payload = response.model_dump(mode="json")

        assert payload["user_type"] == "Judge"
        assert payload["application"] == "VideoWeb"

    def test_mapping_twice_is_equal(self):
        user = create_user()

        assert map_user_to_details_response(user) == map_user_to_details_response(
            user
        )


@pytest.mark.unit
class TestAllocationMapper:
    """Test allocation details mapping."""

    def test_maps_allocation_fields(self):
        allocation = Allocation.for_user(create_user())

        response = map_allocation_to_details_response(allocation)

        assert response.id == allocation.id
        assert response.user_id == allocation.user_id
        assert response.username == allocation.username
        assert response.allocated is False
        assert response.expires_at is None
        assert "user" not in response.model_dump()

    def test_equal_allocations_map_to_equal_responses(self):
        allocation = Allocation.for_user(create_user())
        copy = Allocation(
            id=allocation.id,
            user_id=allocation.user_id,
            username=allocation.username,
            allocated=allocation.allocated,
            expires_at=allocation.expires_at,
            user=allocation.user,
        )

        assert map_allocation_to_details_response(
            allocation
        ) == map_allocation_to_details_response(copy)


@pytest.mark.unit
class TestScalarMappers:
    """Test number and directory account mapping."""

    def test_number(self):
        assert map_number_to_response(3).number == 3

    def test_directory_user_keeps_one_time_password(self):
        new_user = NewDirectoryUser(
            user_id="object-id",
            username="automation.individual1@hmcts.test",
            one_time_password="Xy7!temporary",
        )

        response = map_directory_user_to_response(new_user)

        assert response.model_dump() == {
            "user_id": "object-id",
            "username": "automation.individual1@hmcts.test",
            "one_time_password": "Xy7!temporary",
        }
