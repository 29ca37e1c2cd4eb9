"""Abstract base class for exception handlers."""

from __future__ import annotations

import abc
from typing import Generic, TypeVar

from .handling_result import HandlingResult

T = TypeVar("T", bound=BaseException)
E = TypeVar("E")


class ExceptionHandler(abc.ABC, Generic[T, E]):
    """Contract for objects that turn one category of failure into a result.

    Subclasses declare the category they handle through the first type
    argument of the base class, or through an explicit ``handles`` class
    attribute when the category is not a class (see
    :class:`~faultline.core.handlers.explicit_hierarchy.ExplicitHierarchy`)::

        class KeyErrorHandler(ExceptionHandler[KeyError, str]):
            def handle(self, exception: KeyError) -> HandlingResult[str]:
                return HandlingResult.with_payload(404, "missing key")

    Handlers are expected to be total for the category they declare: the
    dispatch engine never catches or reinterprets what they raise.
    """

    @abc.abstractmethod
    def handle(self, exception: T) -> HandlingResult[E]:
        """Handle ``exception`` and return the result for the caller.

        Args:
            exception: Failure instance of the bound category (or a
                descendant of it).

        Returns:
            The status code and optional payload describing the failure.
        """

    def __call__(self, exception: T) -> HandlingResult[E]:
        return self.handle(exception)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


__all__ = ["ExceptionHandler"]
