"""HandlerRegistry: ordered, process-wide contain handler lookup.

Dispatch order is fixed, highest priority first:

1. ``NullContainHandler`` (built in, never overridable)
2. registered extension handlers, in registration order
3. ``IterableAndTableContainHandler`` (built-in fallback)
4. ``IterableAndSingleValueContainHandler`` (built-in fallback)

Extensions are registered once at import / start-up time; afterwards the
registry is read-only and safe to share between threads.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from contain_check.errors import NoHandlerFoundError
from contain_check.handlers.null import NullContainHandler
from contain_check.handlers.sequence import IterableAndSingleValueContainHandler
from contain_check.handlers.table import IterableAndTableContainHandler
from contain_check.protocols import ContainHandler

__all__ = ["HandlerRegistry", "default_registry", "register_handler"]

logger = logging.getLogger(__name__)


class HandlerRegistry:
    """Ordered predicate-to-handler lookup.

    Example::

        registry = HandlerRegistry()
        registry.register(MyHandler())
        registry.find([1, 2], 2)   # IterableAndSingleValueContainHandler()
    """

    def __init__(self, extensions: list[ContainHandler] | None = None) -> None:
        self._lock = threading.Lock()
        self._null_handler: ContainHandler = NullContainHandler()
        self._extensions: list[ContainHandler] = []
        self._fallbacks: tuple[ContainHandler, ...] = (
            IterableAndTableContainHandler(),
            IterableAndSingleValueContainHandler(),
        )
        for handler in extensions or []:
            self.register(handler)

    def register(self, handler: ContainHandler) -> None:
        """Append an extension handler after previously registered ones.

        Raises:
            TypeError: If ``handler`` does not satisfy ``ContainHandler``.
        """
        if not isinstance(handler, ContainHandler):
            msg = f"contain handler must implement ContainHandler, got {type(handler)!r}"
            raise TypeError(msg)

        with self._lock:
            if any(existing is handler for existing in self._extensions):
                return
            self._extensions.append(handler)
        logger.debug("registered contain handler %r", handler)

    def handlers(self) -> tuple[ContainHandler, ...]:
        """All handlers in dispatch order."""
        with self._lock:
            extensions = tuple(self._extensions)
        return (self._null_handler, *extensions, *self._fallbacks)

    def find(self, actual: Any, expected: Any) -> ContainHandler:
        """Return the first handler accepting ``(actual, expected)``.

        Raises:
            NoHandlerFoundError: When no handler accepts the pair.
        """
        for handler in self.handlers():
            if handler.handle(actual, expected):
                return handler
        raise NoHandlerFoundError(actual, expected)


default_registry = HandlerRegistry()


def register_handler(handler: ContainHandler) -> None:
    """Register an extension handler with the process-wide registry."""
    default_registry.register(handler)
