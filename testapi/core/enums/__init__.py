"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from testapi.core.enums import ErrorCode, Environment
"""

from testapi.core.enums.environment import Environment
from testapi.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
