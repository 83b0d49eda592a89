"""Applications that own test users."""

from enum import Enum


class Application(str, Enum):
    """Application a test user was created for.

    Usernames and user numbers are scoped per (user type, application) so
    parallel suites of different applications never share users.
    """

    ADMIN_WEB = "AdminWeb"
    BOOKINGS_API = "BookingsApi"
    QUEUE_SUBSCRIBER = "QueueSubscriber"
    SERVICE_WEB = "ServiceWeb"
    TEST_API = "TestApi"
    TESTS = "Tests"
    USER_API = "UserApi"
    VIDEO_API = "VideoApi"
    VIDEO_WEB = "VideoWeb"
