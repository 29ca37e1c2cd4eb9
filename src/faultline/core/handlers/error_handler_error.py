"""Base exception hierarchy for the error handling subsystem.

Every error raised by faultline derives from :class:`FaultlineError` so callers
can separate dispatch problems from the application failures being handled.
"""


class FaultlineError(Exception):
    """Base exception for failures within the error handling infrastructure.

    The exception acts as a marker so wiring code can catch and report
    registry problems without masking unrelated runtime errors.
    """


__all__ = ["FaultlineError"]
