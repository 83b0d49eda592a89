"""HTTP clients for adjacent services."""

from testapi.infrastructure.clients.user_api_client import UserApiClient

__all__ = ["UserApiClient"]
