"""User commands (CQRS write operations).

Commands represent intent to change stored users.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Handlers return Result types; commands carry no response slot
"""

from dataclasses import dataclass
from uuid import UUID

from testapi.domain.enums import Application, UserType


@dataclass(frozen=True, kw_only=True)
class CreateUser:
    """Create a test user record.

    The caller is expected to have checked the username is free; the store
    still rejects a duplicate (case-insensitive) and the handler reports it
    as a conflict.

    Attributes:
        username: Login name (unique, case-insensitive).
        contact_email: Contact address.
        first_name: Given name.
        last_name: Family name.
        display_name: Display name.
        number: Sequence number within (user_type, application), optional.
        user_type: Role category.
        application: Owning application.

    Example:
        >>> command = CreateUser(
        ...     username="automation_judge_1@hearings.test",
        ...     contact_email="automation_judge_1@test.com",
        ...     first_name="Automation",
        ...     last_name="Judge 1",
        ...     display_name="Automation Judge 1",
        ...     number=1,
        ...     user_type=UserType.JUDGE,
        ...     application=Application.VIDEO_WEB,
        ... )
        >>> result = await handler.handle(command)
    """

    username: str
    contact_email: str
    first_name: str
    last_name: str
    display_name: str
    number: int | None
    user_type: UserType
    application: Application


@dataclass(frozen=True, kw_only=True)
class CreateADUser:
    """Create a directory (AAD) account and record it as a test user.

    Only the names and contact email are sent to the directory; the hearing
    fields describe the participant and are accepted for callers that book
    hearings with the account.

    Attributes:
        title: Honorific (Mr, Mrs, ...).
        first_name: Given name.
        middle_names: Middle names, optional.
        last_name: Family name.
        display_name: Display name.
        username: Requested username (the directory assigns the final one).
        contact_email: Contact address, used as the recovery email.
        case_role_name: Case role of the participant.
        hearing_role_name: Hearing role of the participant.
        reference: Participant reference, optional.
        representee: Represented party, optional.
        organisation_name: Organisation, optional.
        telephone_number: Telephone number, optional.
        user_type: Role category of the local record.
        application: Owning application of the local record.
    """

    title: str
    first_name: str
    middle_names: str | None = None
    last_name: str
    display_name: str
    username: str
    contact_email: str
    case_role_name: str
    hearing_role_name: str
    reference: str | None = None
    representee: str | None = None
    organisation_name: str | None = None
    telephone_number: str | None = None
    user_type: UserType = UserType.INDIVIDUAL
    application: Application = Application.TEST_API


@dataclass(frozen=True, kw_only=True)
class DeleteUser:
    """Delete a test user by id.

    Attributes:
        user_id: User identifier.
    """

    user_id: UUID
