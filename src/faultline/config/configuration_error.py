"""Error raised when settings cannot be loaded or validated."""

from faultline.core.handlers.error_handler_error import FaultlineError


class ConfigurationError(FaultlineError):
    """Base exception for configuration errors."""


__all__ = ["ConfigurationError"]
