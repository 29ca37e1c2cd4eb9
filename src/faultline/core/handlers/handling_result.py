"""Result object returned by exception handlers.

The :class:`HandlingResult` pairs a status code with an optional payload. It is
the only value that crosses the boundary between the dispatch engine and the
serialization layer that turns results into transport responses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

E = TypeVar("E")


@dataclass(frozen=True)
class HandlingResult(Generic[E]):
    """Immutable outcome of handling a failure.

    Attributes:
        status_code: Status code the response layer should emit.
        payload: Entity describing the failure, or ``None`` when the result
            carries only a status code.

    Use the :meth:`with_payload` and :meth:`just_status` factories rather
    than the constructor so the payload invariant is enforced.
    """

    status_code: int
    payload: Optional[E] = None

    @property
    def has_payload(self) -> bool:
        """Return whether the result carries a payload."""

        return self.payload is not None

    @classmethod
    def with_payload(cls, status_code: int, payload: E) -> "HandlingResult[E]":
        """Build a result carrying ``payload``.

        Args:
            status_code: Status code to report.
            payload: Entity describing the failure. Must not be ``None``.

        Returns:
            A result holding both values.

        Raises:
            ValueError: If ``payload`` is ``None``; use :meth:`just_status`
                for results without an entity.
        """

        if payload is None:
            raise ValueError(
                "A payload must be set when using with_payload. "
                "For results without payload use just_status"
            )
        return cls(status_code, payload)

    @classmethod
    def just_status(cls, status_code: int) -> "HandlingResult[E]":
        """Build a result that carries only ``status_code``."""

        return cls(status_code, None)


__all__ = ["HandlingResult"]
