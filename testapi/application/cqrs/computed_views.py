"""CQRS registry checks.

Used by startup validation and the registry tests.
"""

from collections.abc import Callable


def get_all_handler_classes() -> list[type]:
    """Get all registered handler classes (commands + queries), deduplicated."""
    from testapi.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    handlers: set[type] = set()
    for cmd_meta in COMMAND_REGISTRY:
        handlers.add(cmd_meta.handler_class)
    for qry_meta in QUERY_REGISTRY:
        handlers.add(qry_meta.handler_class)
    return list(handlers)


def validate_registry_consistency(
    dependency_checker: Callable[[type], list[str]] | None = None,
) -> list[str]:
    """Validate registry for common issues.

    Args:
        dependency_checker: Optional callable returning the unresolvable
            constructor dependencies of a handler class. The container passes
            its own resolver at startup.

    Returns:
        List of error messages. Empty if registry is consistent.

    Example:
        >>> validate_registry_consistency()
        []
    """
    from testapi.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    errors: list[str] = []

    command_classes = [meta.command_class for meta in COMMAND_REGISTRY]
    if len(command_classes) != len(set(command_classes)):
        errors.append("Duplicate command classes in COMMAND_REGISTRY")

    query_classes = [meta.query_class for meta in QUERY_REGISTRY]
    if len(query_classes) != len(set(query_classes)):
        errors.append("Duplicate query classes in QUERY_REGISTRY")

    for meta in [*COMMAND_REGISTRY, *QUERY_REGISTRY]:
        if not callable(getattr(meta.handler_class, "handle", None)):
            errors.append(f"Handler {meta.handler_class.__name__}: missing handle() method")

    if dependency_checker is not None:
        for handler_class in sorted(get_all_handler_classes(), key=lambda h: h.__name__):
            for problem in dependency_checker(handler_class):
                errors.append(f"Handler {handler_class.__name__}: {problem}")

    return errors
