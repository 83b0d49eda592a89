"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from testapi.core.errors import DomainError, ConflictError, NotFoundError
"""

from testapi.core.errors.common_errors import (
    ConflictError,
    NotFoundError,
)
from testapi.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "NotFoundError",
    "ConflictError",
]
