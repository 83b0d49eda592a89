"""User exceptions raised at the HTTP boundary."""

from testapi.domain.enums import Application


class UserAlreadyExistsError(Exception):
    """A user with the requested username already exists.

    Raised by the create-user route after its uniqueness pre-check and
    translated into a 409 problem details response by the registered
    exception handler.

    Attributes:
        username: Username of the existing user.
        application: Application that owns the existing user.
    """

    def __init__(self, username: str, application: Application) -> None:
        self.username = username
        self.application = application
        super().__init__(
            f"User with username '{username}' already exists "
            f"for application {application.value}"
        )
