"""Decorator marking handlers for package scanning."""

from __future__ import annotations

import inspect
from typing import Any, Callable, Hashable, Optional, TypeVar

from .exception_handler import ExceptionHandler
from .handler_binding import HANDLES_ATTRIBUTE

F = TypeVar("F", bound=Callable[..., Any])

MARKER_ATTRIBUTE = "__faultline_handler__"


def exception_handler(handles: Optional[Hashable] = None) -> Callable[[F], F]:
    """Mark an :class:`ExceptionHandler` subclass or a function as discoverable.

    Marked objects are picked up by
    :class:`~faultline.discovery.package_scanner.PackageScanner`. Classes
    must also implement the :class:`ExceptionHandler` interface.

    Args:
        handles: Optional explicit category. When omitted the category is
            read from the ``ExceptionHandler[...]`` base of a class or from
            the annotation of a function's first parameter.

    Returns:
        A decorator returning the decorated object unchanged apart from the
        marker attributes.

    Example::

        @exception_handler()
        class KeyErrorHandler(ExceptionHandler[KeyError, str]):
            def handle(self, exception):
                return HandlingResult.with_payload(404, "missing key")

        @exception_handler("not_found")
        def not_found(failure):
            return HandlingResult.just_status(404)
    """

    if inspect.isfunction(handles) or (
        isinstance(handles, type) and issubclass(handles, ExceptionHandler)
    ):
        raise TypeError("exception_handler must be called: use @exception_handler()")

    def decorator(target: F) -> F:
        if isinstance(target, type) and not issubclass(target, ExceptionHandler):
            raise TypeError(
                f"{target.__qualname__} must implement ExceptionHandler to be an exception handler"
            )
        if not callable(target):
            raise TypeError(f"{target!r} is not callable")

        setattr(target, MARKER_ATTRIBUTE, True)
        if handles is not None:
            setattr(target, HANDLES_ATTRIBUTE, handles)
        return target

    return decorator


def is_marked_handler(candidate: Any) -> bool:
    """Return whether ``candidate`` itself was marked by :func:`exception_handler`."""

    if isinstance(candidate, type):
        return bool(candidate.__dict__.get(MARKER_ATTRIBUTE, False))
    return bool(getattr(candidate, MARKER_ATTRIBUTE, False))


__all__ = ["MARKER_ATTRIBUTE", "exception_handler", "is_marked_handler"]
