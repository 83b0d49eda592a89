"""Query and command dispatchers.

A dispatcher maps each query/command class to one handler instance and
routes an object to the handler registered for its exact type. Dispatchers
are built per request by the container (handlers hold a request-scoped
session) and injected into routers with FastAPI Depends.

Usage:
    dispatcher = QueryDispatcher({GetUserById: GetUserByIdHandler(repo)})
    user = await dispatcher.dispatch(GetUserById(user_id=user_id))
"""

from collections.abc import Mapping
from typing import Any, Protocol


class HandlerNotRegisteredError(LookupError):
    """No handler is registered for the dispatched object's type.

    A wiring defect, not a request error: it propagates and becomes a 500.
    """

    def __init__(self, kind: str, message_class: type) -> None:
        self.kind = kind
        self.message_class = message_class
        super().__init__(f"No {kind} handler registered for {message_class.__name__}")


class Handler(Protocol):
    """Anything with an async handle() method."""

    async def handle(self, message: Any) -> Any: ...


class _Dispatcher:
    _kind = "message"

    def __init__(self, handlers: Mapping[type, Handler] | None = None) -> None:
        self._handlers: dict[type, Handler] = dict(handlers or {})

    def register(self, message_class: type, handler: Handler) -> None:
        """Register (or replace) the handler for a class."""
        self._handlers[message_class] = handler

    def is_registered(self, message_class: type) -> bool:
        return message_class in self._handlers

    async def dispatch(self, message: Any) -> Any:
        """Route message to the handler registered for type(message).

        Raises:
            HandlerNotRegisteredError: No handler for the exact type.
        """
        handler = self._handlers.get(type(message))
        if handler is None:
            raise HandlerNotRegisteredError(self._kind, type(message))
        return await handler.handle(message)


class QueryDispatcher(_Dispatcher):
    """Dispatches queries. Handlers return entities, lists or scalars."""

    _kind = "query"


class CommandDispatcher(_Dispatcher):
    """Dispatches commands. Handlers return Result values."""

    _kind = "command"
