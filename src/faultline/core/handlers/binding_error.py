"""Exception module for handler binding failures."""

from .error_handler_error import FaultlineError


class BindingError(FaultlineError):
    """Raised when the category bound to a handler cannot be determined.

    The error surfaces while the registry is being built, typically because a
    handler neither carries an explicit ``handles`` tag nor a parameterised
    :class:`~faultline.core.handlers.exception_handler.ExceptionHandler` base,
    or because the discovered value is not a category of the active hierarchy.
    Construction of the error handler is aborted.
    """


__all__ = ["BindingError"]
