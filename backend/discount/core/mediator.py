"""In-process request dispatch.

A ``Mediator`` holds an explicit table from request type to the single handler
that serves it. The table is filled once while the process is wired up and is
read-only afterwards, so it is safe to share between worker threads.
"""

from collections.abc import Callable, Iterable
from typing import Any

Handler = Callable[[Any], Any]


class MediatorError(Exception):
    """Base class for mediator wiring errors."""


class HandlerRegistrationError(MediatorError):
    """Raised when a request type has no handler or more than one."""


class HandlerNotFoundError(MediatorError):
    """Raised when a request is sent for a type with no registered handler."""


class Mediator:
    def __init__(self) -> None:
        self._handlers: dict[type, Handler] = {}

    def register(self, request_type: type, handler: Handler) -> None:
        if request_type in self._handlers:
            raise HandlerRegistrationError(
                f"A handler is already registered for {request_type.__name__}"
            )
        self._handlers[request_type] = handler

    def verify(self, request_types: Iterable[type]) -> None:
        """Fail if any of ``request_types`` has no registered handler."""
        missing = [t.__name__ for t in request_types if t not in self._handlers]
        if missing:
            raise HandlerRegistrationError(f"No handler registered for {', '.join(missing)}")

    def send(self, request: Any) -> Any:
        """Route ``request`` to its handler and return the handler's result.

        Lookup is by exact type; subclasses of a registered type are not matched.
        Exceptions raised by the handler propagate unchanged.
        """
        handler = self._handlers.get(type(request))
        if handler is None:
            raise HandlerNotFoundError(f"No handler registered for {type(request).__name__}")
        return handler(request)
