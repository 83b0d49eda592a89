"""CQRS registry entry types.

Entries are frozen: the registry never changes at runtime.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class CommandMetadata:
    """Registry entry binding a command to its handler.

    Attributes:
        command_class: The command dataclass (e.g., CreateUser).
        handler_class: The handler class (e.g., CreateUserHandler).
        description: Human-readable description for documentation.
    """

    command_class: type
    handler_class: type
    description: str = ""


@dataclass(frozen=True, kw_only=True)
class QueryMetadata:
    """Registry entry binding a query to its handler."""

    query_class: type
    handler_class: type
    description: str = ""
