"""Error raised when a provider has no instance for a handler class."""

from faultline.core.handlers.error_handler_error import FaultlineError


class HandlerNotProvidedError(FaultlineError):
    pass


__all__ = ["HandlerNotProvidedError"]
