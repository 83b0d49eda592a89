"""CQRS registry and dispatch.

Exports the registry entries, the startup consistency check and the
query/command dispatchers.
"""

from testapi.application.cqrs.metadata import CommandMetadata, QueryMetadata
from testapi.application.cqrs.registry import (
    COMMAND_REGISTRY,
    QUERY_REGISTRY,
)
from testapi.application.cqrs.computed_views import (
    get_all_handler_classes,
    validate_registry_consistency,
)
from testapi.application.cqrs.dispatcher import (
    CommandDispatcher,
    HandlerNotRegisteredError,
    QueryDispatcher,
)

__all__ = [
    # Registry
    "CommandMetadata",
    "QueryMetadata",
    "COMMAND_REGISTRY",
    "QUERY_REGISTRY",
    # Validation
    "get_all_handler_classes",
    "validate_registry_consistency",
    # Dispatch
    "CommandDispatcher",
    "HandlerNotRegisteredError",
    "QueryDispatcher",
]
