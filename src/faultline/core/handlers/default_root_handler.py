"""Fallback handler bound to the root category when none is supplied."""

from __future__ import annotations

from typing import Any

from .exception_handler import ExceptionHandler
from .handling_result import HandlingResult

DEFAULT_STATUS_CODE = 500


class DefaultRootHandler(ExceptionHandler):
    """Return a fixed status code and no payload for any failure.

    Args:
        status_code: Status code reported for every failure.
    """

    def __init__(self, status_code: int = DEFAULT_STATUS_CODE) -> None:
        self.status_code = status_code

    def handle(self, exception: BaseException) -> HandlingResult[Any]:
        return HandlingResult.just_status(self.status_code)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DefaultRootHandler):
            return NotImplemented
        return self.status_code == other.status_code

    def __hash__(self) -> int:
        return hash((DefaultRootHandler, self.status_code))

    def __repr__(self) -> str:
        return f"DefaultRootHandler(status_code={self.status_code})"


DEFAULT_ROOT_HANDLER = DefaultRootHandler()

__all__ = ["DEFAULT_ROOT_HANDLER", "DEFAULT_STATUS_CODE", "DefaultRootHandler"]
