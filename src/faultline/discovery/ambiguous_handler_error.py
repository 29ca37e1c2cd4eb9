"""Error raised when a provider holds several instances for a handler class."""

from faultline.core.handlers.error_handler_error import FaultlineError


class AmbiguousHandlerError(FaultlineError):
    """Raised when more than one provided instance matches the requested class."""


__all__ = ["AmbiguousHandlerError"]
