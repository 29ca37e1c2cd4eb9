"""Exception module for malformed explicit category hierarchies."""

from .error_handler_error import FaultlineError


class InvalidHierarchyError(FaultlineError):
    """Raised when an explicit parent table is not a single-rooted tree.

    Covers missing or multiple roots, parents that are not declared
    categories, and cycles in the parent relation.
    """


__all__ = ["InvalidHierarchyError"]
