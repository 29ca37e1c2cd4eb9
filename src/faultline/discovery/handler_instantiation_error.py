"""Error raised when a discovered handler class cannot be instantiated."""

from faultline.core.handlers.error_handler_error import FaultlineError


class HandlerInstantiationError(FaultlineError):
    """Raised when neither the provider nor the class itself yields an instance."""


__all__ = ["HandlerInstantiationError"]
