"""Exception module for resolution failures.

A registry always holds an entry for the root category, so resolution can only
come back empty when the hierarchy itself is broken, for instance when an
explicit parent table does not know the category of the failure being handled.
"""

from .error_handler_error import FaultlineError


class NoHandlerError(FaultlineError):
    """Raised when no registered category is an ancestor of the failure.

    This is an internal-consistency fault. It is never converted into a
    default result because doing so would hide a malformed hierarchy.
    """


__all__ = ["NoHandlerError"]
