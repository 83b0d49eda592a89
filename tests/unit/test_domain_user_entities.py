"""Unit tests for user domain entities and enums.

Tests cover:
- normalize_username (Unicode case folding)
- Allocation.for_user
- DirectoryProfile defaults
- UserType / Application wire values
"""

from dataclasses import FrozenInstanceError

import pytest

from testapi.domain.entities import (
    Allocation,
    DirectoryProfile,
    NewDirectoryUser,
    normalize_username,
)
from testapi.domain.enums import Application, UserType
from tests.conftest import create_user


@pytest.mark.unit
class TestUserEntity:
    """Test User behaviour."""

    def test_user_may_be_unnumbered(self):
        user = create_user(number=None, username="manual@hearings.test")

        assert user.number is None


@pytest.mark.unit
class TestNormalizeUsername:
    """Test the username folding shared by lookup and uniqueness."""

    def test_ascii_case_is_folded(self):
        assert normalize_username("Automation_Judge_1@Hearings.TEST") == (
            "automation_judge_1@hearings.test"
        )

    def test_accented_capitals_are_folded(self):
        assert normalize_username("Élodie@x.test") == normalize_username("élodie@x.test")
        assert normalize_username("ÉLODIE@X.TEST") == "élodie@x.test"

    def test_full_unicode_folding(self):
        assert normalize_username("Straße@x.test") == normalize_username("STRASSE@x.test")


@pytest.mark.unit
class TestAllocation:
    """Test Allocation construction."""

    def test_for_user_copies_identity(self):
        user = create_user()

        allocation = Allocation.for_user(user)

        assert allocation.user_id == user.id
        assert allocation.username == user.username
        assert allocation.user is user
        assert allocation.allocated is False
        assert allocation.expires_at is None
        assert allocation.id != user.id


@pytest.mark.unit
class TestDirectoryValues:
    """Test directory profile and created-account values."""

    def test_profile_is_test_user_by_default(self):
        profile = DirectoryProfile(
            first_name="Automation", last_name="Individual 1", recovery_email="a@b.c"
        )

        assert profile.is_test_user is True

    def test_new_directory_user_is_immutable(self):
        new_user = NewDirectoryUser(user_id="id", username="u", one_time_password="p")

        with pytest.raises(FrozenInstanceError):
            new_user.username = "other"


@pytest.mark.unit
class TestUserEnums:
    """Test enum wire values."""

    def test_user_type_values_are_pascal_case(self):
        assert UserType("VideoHearingsOfficer") is UserType.VIDEO_HEARINGS_OFFICER
        assert UserType.JUDGE.value == "Judge"

    def test_application_values_are_pascal_case(self):
        assert Application("VideoWeb") is Application.VIDEO_WEB
        assert Application.TEST_API.value == "TestApi"

    def test_unknown_user_type_rejected(self):
        with pytest.raises(ValueError):
            UserType("judge")

    def test_hearing_participants_exclude_staff(self):
        participants = UserType.hearing_participants()

        assert UserType.INDIVIDUAL in participants
        assert UserType.JUDGE not in participants
        assert UserType.TESTER not in participants
