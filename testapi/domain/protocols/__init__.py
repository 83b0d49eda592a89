"""Domain protocols (ports).

Structural interfaces implemented by the infrastructure layer.
"""

from testapi.domain.protocols.logger_protocol import LoggerProtocol
from testapi.domain.protocols.user_api_protocol import UserApiProtocol
from testapi.domain.protocols.user_repository import UserRepository

__all__ = [
    "LoggerProtocol",
    "UserApiProtocol",
    "UserRepository",
]
