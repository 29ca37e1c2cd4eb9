"""Facade dispatching failures to the most specific registered handler."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from .category_hierarchy import CategoryHierarchy
from .default_root_handler import DEFAULT_STATUS_CODE
from .handler_registry import HandlerRegistry, build_registry
from .handler_resolver import HandlerResolver
from .handling_result import HandlingResult
from .null_failure_error import NullFailureError

logger = logging.getLogger(__name__)


class ErrorHandler:
    """Handle any failure with the handler bound to its nearest category.

    The registry is built once, during construction, and never changes
    afterwards; :meth:`handle` only reads it, so one instance can be shared
    by concurrent callers without locking.

    Args:
        handlers: Handlers in priority order (see
            :func:`~faultline.core.handlers.handler_registry.build_registry`).
        hierarchy: Hierarchy used to classify failures. Defaults to
            exception classes.
        default_status_code: Status code reported by the fallback handler
            when no handler is bound to the root category.

    Raises:
        BindingError: If the category of a handler cannot be determined.
            No partially usable instance is produced.

    Example::

        error_handler = ErrorHandler([KeyErrorHandler(), RuntimeErrorHandler()])
        result = error_handler.handle(KeyError("user"))
        result.status_code, result.payload
    """

    def __init__(
        self,
        handlers: Iterable[Any] = (),
        *,
        hierarchy: Optional[CategoryHierarchy] = None,
        default_status_code: int = DEFAULT_STATUS_CODE,
    ) -> None:
        self._registry = build_registry(handlers, hierarchy, default_status_code)
        self._resolver = HandlerResolver(self._registry)

        logger.info("Error handler initialised")
        logger.debug(
            "Will handle %s",
            [self._registry.hierarchy.describe(category) for category in self._registry],
        )

    @property
    def registry(self) -> HandlerRegistry:
        """Return the immutable registry backing this error handler."""

        return self._registry

    @property
    def resolver(self) -> HandlerResolver:
        return self._resolver

    def handle(self, exception: Any) -> HandlingResult[Any]:
        """Handle ``exception`` with the most specific registered handler.

        Args:
            exception: The failure instance to handle.

        Returns:
            Whatever the selected handler returns. Errors raised by the
            handler propagate unchanged.

        Raises:
            NullFailureError: If ``exception`` is ``None``.
            NoHandlerError: If the hierarchy does not lead the failure to
                the root category.
        """

        if exception is None:
            raise NullFailureError("The exception to handle must not be None")

        handler = self._resolver.resolve_handler(exception)
        return handler(exception)

    def __call__(self, exception: Any) -> HandlingResult[Any]:
        return self.handle(exception)

    def __repr__(self) -> str:
        return f"ErrorHandler({self._registry!r})"


__all__ = ["ErrorHandler"]
