"""Error raised when handler packages cannot be scanned."""

from faultline.core.handlers.error_handler_error import FaultlineError


class HandlerDiscoveryError(FaultlineError):
    """Raised when a package or one of its submodules fails to import."""


__all__ = ["HandlerDiscoveryError"]
