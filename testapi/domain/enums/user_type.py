"""Test user role categories.

Each synthetic user plays one hearing-related role. The role decides which
front-end journeys a test suite can drive with the user.

Values keep the PascalCase names the test suites already send over the wire
(e.g. ``?userType=Judge``).

Usage:
    from testapi.domain.enums import UserType

    if user.user_type in UserType.hearing_participants():
        ...
"""

from enum import Enum


class UserType(str, Enum):
    """Role category of a test user.

    Inherits from str for easy serialization and database storage.

    Example:
        >>> UserType("Judge") is UserType.JUDGE
        True
    """

    JUDGE = "Judge"
    VIDEO_HEARINGS_OFFICER = "VideoHearingsOfficer"
    CASE_ADMIN = "CaseAdmin"
    INDIVIDUAL = "Individual"
    REPRESENTATIVE = "Representative"
    OBSERVER = "Observer"
    PANEL_MEMBER = "PanelMember"
    WINGER = "Winger"
    WITNESS = "Witness"
    INTERPRETER = "Interpreter"
    TESTER = "Tester"

    @classmethod
    def hearing_participants(cls) -> list["UserType"]:
        """User types that join a hearing as a participant.

        Returns:
            list[UserType]: Participant roles (excludes staff and testers).
        """
        return [
            cls.INDIVIDUAL,
            cls.REPRESENTATIVE,
            cls.OBSERVER,
            cls.PANEL_MEMBER,
            cls.WINGER,
            cls.WITNESS,
            cls.INTERPRETER,
        ]
