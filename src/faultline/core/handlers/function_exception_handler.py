"""Function-based implementation of the exception handler contract."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Optional

from .exception_handler import ExceptionHandler
from .handling_result import HandlingResult


class FunctionExceptionHandler(ExceptionHandler):
    """Wrap a callable in the :class:`ExceptionHandler` interface.

    Args:
        func: Callable receiving the failure and returning a
            :class:`HandlingResult`.
        handles: Category the callable is bound to. When omitted the
            annotation of the callable's first parameter is used while the
            registry is built.
        name: Optional label to override the derived handler name.
    """

    def __init__(
        self,
        func: Callable[[Any], HandlingResult[Any]],
        handles: Optional[Hashable] = None,
        name: Optional[str] = None,
    ) -> None:
        self.func = func
        self.name = name or getattr(func, "__name__", repr(func))
        if handles is not None:
            self.handles = handles

    def handle(self, exception: BaseException) -> HandlingResult[Any]:
        return self.func(exception)

    def __repr__(self) -> str:
        return f"FunctionExceptionHandler({self.name})"


__all__ = ["FunctionExceptionHandler"]
