"""Dependency-injection seam supplying handler instances to the factory."""

from __future__ import annotations

import logging
import threading
from typing import Any, Iterable, Protocol, TypeVar, runtime_checkable

from .ambiguous_handler_error import AmbiguousHandlerError
from .handler_not_provided_error import HandlerNotProvidedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@runtime_checkable
class HandlerProvider(Protocol):
    """Anything able to return a ready instance of a handler class.

    Implementations raise :class:`HandlerNotProvidedError` when they hold no
    instance and :class:`AmbiguousHandlerError` when they hold several.
    """

    def get(self, handler_class: type[T]) -> T: ...


class InstanceProvider:
    """Provider backed by instances registered up front.

    An instance matches a requested class when it is an instance of that
    class or of one of its subclasses.

    Example::

        provider = InstanceProvider([KeyErrorHandler(repository)])
        provider.get(KeyErrorHandler)
    """

    def __init__(self, instances: Iterable[Any] = ()) -> None:
        self._instances: list[Any] = []
        self._lock = threading.RLock()
        for instance in instances:
            self.register(instance)

    def register(self, instance: Any) -> None:
        """Make ``instance`` available to :meth:`get`."""

        if isinstance(instance, type):
            raise TypeError(f"Register an instance of {instance.__qualname__}, not the class")
        with self._lock:
            self._instances.append(instance)
        logger.debug("Registered provided instance %r", instance)

    def get(self, handler_class: type[T]) -> T:
        with self._lock:
            matches = [instance for instance in self._instances if isinstance(instance, handler_class)]

        if not matches:
            raise HandlerNotProvidedError(f"No instance of {handler_class.__qualname__} is provided")
        if len(matches) > 1:
            raise AmbiguousHandlerError(
                f"{len(matches)} provided instances match {handler_class.__qualname__}: {matches!r}"
            )
        return matches[0]

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)


__all__ = ["HandlerProvider", "InstanceProvider"]
