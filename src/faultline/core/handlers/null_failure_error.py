"""Exception module for dispatch requests without a failure instance."""

from .error_handler_error import FaultlineError


class NullFailureError(FaultlineError):
    """Raised when ``handle`` is invoked with ``None`` instead of an exception."""


__all__ = ["NullFailureError"]
