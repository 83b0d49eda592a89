"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for domain-level error handling

The core module has NO dependencies on other application layers.
"""

from testapi.core.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
)
from testapi.core.enums import ErrorCode
from testapi.core.result import Failure, Result, Success

__all__ = [
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
]
