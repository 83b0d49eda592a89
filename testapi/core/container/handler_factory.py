"""Handler Factory - Auto-wire handler dependencies from type hints.

Introspects handler constructors and resolves dependencies from the
container, then builds the query/command dispatchers from the CQRS registry.

Resolution rules (by annotation name):
- *Repository: created with the request session
- *Protocol: app-scoped singleton from the container
- Optional parameters left unresolved become None

Usage:
    from testapi.core.container import get_query_dispatcher

    @router.get("/users/{user_id}")
    async def get_user(
        user_id: UUID,
        queries: QueryDispatcher = Depends(get_query_dispatcher),
    ):
        user = await queries.dispatch(GetUserById(user_id=user_id))
"""

import inspect
from collections.abc import Callable
from typing import Any, TypeVar, get_type_hints

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from testapi.application.cqrs.dispatcher import CommandDispatcher, QueryDispatcher
from testapi.core.container.infrastructure import (
    get_db_session,
    get_logger,
    get_user_api_client,
)

T = TypeVar("T")


# =============================================================================
# Dependency Type Mappings
# =============================================================================


def _repository_classes() -> dict[str, type]:
    # Imported lazily to keep the container importable without the models
    from testapi.infrastructure.persistence.repositories import UserRepository

    return {"UserRepository": UserRepository}


SINGLETON_FACTORIES: dict[str, Callable[[], Any]] = {
    "LoggerProtocol": get_logger,
    "UserApiProtocol": get_user_api_client,
}


def get_type_name(annotation: Any) -> str:
    """Extract type name from annotation.

    Handles class types, ``X | None`` unions and string forward references.
    """
    if annotation is None:
        return "None"

    # Optional types (X | None, Optional[X]): use the first non-None member
    args = getattr(annotation, "__args__", None)
    if args and not isinstance(annotation, type):
        for arg in args:
            if arg is not type(None):
                return get_type_name(arg)
        return "None"

    if isinstance(annotation, type):
        return annotation.__name__

    if isinstance(annotation, str):
        return annotation.split(".")[-1]

    return str(annotation).split(".")[-1].rstrip("'>")


def analyze_handler_dependencies(handler_class: type) -> dict[str, dict[str, Any]]:
    """Analyze handler __init__ to discover dependencies.

    Args:
        handler_class: Handler class to analyze.

    Returns:
        Dict mapping parameter names to dependency info dicts with keys
        type_name (str), annotation and is_optional (bool).
    """
    init_method = getattr(handler_class, "__init__", None)
    if init_method is None or init_method is object.__init__:
        return {}

    try:
        hints = get_type_hints(init_method)
    except NameError:
        # Unresolvable forward reference; fall back to raw annotations
        sig = inspect.signature(init_method)
        hints = {
            name: param.annotation
            for name, param in sig.parameters.items()
            if name != "self" and param.annotation != inspect.Parameter.empty
        }

    hints.pop("return", None)

    dependencies: dict[str, dict[str, Any]] = {}
    for param_name, annotation in hints.items():
        if param_name == "self":
            continue
        args = getattr(annotation, "__args__", ())
        dependencies[param_name] = {
            "type_name": get_type_name(annotation),
            "annotation": annotation,
            "is_optional": type(None) in args,
        }

    return dependencies


def _is_repository_type(type_name: str) -> bool:
    return type_name.endswith("Repository")


def _is_singleton_type(type_name: str) -> bool:
    return type_name in SINGLETON_FACTORIES


def check_handler_dependencies(handler_class: type) -> list[str]:
    """List constructor dependencies the container cannot resolve.

    Args:
        handler_class: Handler class to check.

    Returns:
        One message per unresolvable, non-optional parameter.
    """
    repositories = _repository_classes()
    problems: list[str] = []
    for param_name, dep_info in analyze_handler_dependencies(handler_class).items():
        type_name = dep_info["type_name"]
        if type_name in repositories or _is_singleton_type(type_name):
            continue
        if dep_info["is_optional"]:
            continue
        problems.append(
            f"cannot resolve dependency '{param_name}' of type '{type_name}'"
        )
    return problems


async def create_handler(
    handler_class: type[T],
    session: AsyncSession,
    **overrides: Any,
) -> T:
    """Create handler instance with auto-wired dependencies.

    Args:
        handler_class: Handler class to instantiate.
        session: Database session for repositories.
        **overrides: Explicit dependency overrides (by parameter name).

    Returns:
        Handler instance with injected dependencies.

    Raises:
        ValueError: If a required dependency cannot be resolved.

    Example:
        >>> handler = await create_handler(CreateUserHandler, session)
        >>> result = await handler.handle(command)
    """
    repositories = _repository_classes()
    resolved: dict[str, Any] = {}

    for param_name, dep_info in analyze_handler_dependencies(handler_class).items():
        type_name = dep_info["type_name"]

        if param_name in overrides:
            resolved[param_name] = overrides[param_name]
        elif _is_repository_type(type_name) and type_name in repositories:
            resolved[param_name] = repositories[type_name](session=session)
        elif _is_singleton_type(type_name):
            resolved[param_name] = SINGLETON_FACTORIES[type_name]()
        elif dep_info["is_optional"]:
            resolved[param_name] = None
        else:
            raise ValueError(
                f"Cannot resolve dependency '{param_name}' "
                f"of type '{type_name}' for {handler_class.__name__}"
            )

    return handler_class(**resolved)


# =============================================================================
# Dispatchers
# =============================================================================


async def build_query_dispatcher(session: AsyncSession) -> QueryDispatcher:
    """Build a query dispatcher with one handler per registered query."""
    from testapi.application.cqrs.registry import QUERY_REGISTRY

    dispatcher = QueryDispatcher()
    for meta in QUERY_REGISTRY:
        dispatcher.register(
            meta.query_class, await create_handler(meta.handler_class, session)
        )
    return dispatcher


async def build_command_dispatcher(session: AsyncSession) -> CommandDispatcher:
    """Build a command dispatcher with one handler per registered command."""
    from testapi.application.cqrs.registry import COMMAND_REGISTRY

    dispatcher = CommandDispatcher()
    for meta in COMMAND_REGISTRY:
        dispatcher.register(
            meta.command_class, await create_handler(meta.handler_class, session)
        )
    return dispatcher


async def get_query_dispatcher(
    session: AsyncSession = Depends(get_db_session),
) -> QueryDispatcher:
    """FastAPI dependency: request-scoped query dispatcher.

    Tests override it with ``app.dependency_overrides[get_query_dispatcher]``.
    """
    return await build_query_dispatcher(session)


async def get_command_dispatcher(
    session: AsyncSession = Depends(get_db_session),
) -> CommandDispatcher:
    """FastAPI dependency: request-scoped command dispatcher.

    Shares the request's session with the query dispatcher.
    """
    return await build_command_dispatcher(session)
