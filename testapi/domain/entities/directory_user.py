"""Directory (AAD) user value types.

Exchanged with the User API port: the profile submitted for creation and
the account the directory created.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class DirectoryProfile:
    """Profile submitted to the directory when creating an account.

    Attributes:
        first_name: Given name
        last_name: Family name
        recovery_email: Contact address registered with the account
        is_test_user: Marks the account as synthetic in the directory
    """

    first_name: str
    last_name: str
    recovery_email: str
    is_test_user: bool = True


@dataclass(frozen=True, kw_only=True)
class NewDirectoryUser:
    """Account created by the directory.

    Attributes:
        user_id: Directory object id of the new account
        username: Sign-in name assigned by the directory
        one_time_password: Initial password (never logged)
    """

    user_id: str
    username: str
    one_time_password: str
