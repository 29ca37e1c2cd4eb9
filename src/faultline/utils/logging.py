"""Logging helpers for faultline components.

The library only emits records through module loggers. Applications, and the
``faultline`` command line, attach output to the package logger with
:func:`configure_logger`.
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "faultline"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logger(
    name: str = PACKAGE_LOGGER,
    level: int | None = None,
    handler: logging.Handler | None = None,
) -> logging.Logger:
    """Attach output to the ``name`` logger once and set its level.

    Parameters:
        name: Name of the logger to configure.
        level: Level applied to the logger. Defaults to ``logging.INFO`` the
            first time the logger is configured; later calls only change the
            level when one is given.
        handler: Handler to attach. A ``StreamHandler`` using
            :data:`DEFAULT_FORMAT` is created when omitted. Handlers without a
            formatter receive :data:`DEFAULT_FORMAT`.

    Returns:
        logging.Logger: The configured logger.

    Side Effects:
        The handler is attached only when the logger has none, so repeated
        calls never duplicate output.
    """

    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = handler or logging.StreamHandler()
        if handler.formatter is None:
            handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level if level is not None else logging.INFO)
    elif level is not None:
        logger.setLevel(level)

    return logger


__all__ = ["DEFAULT_FORMAT", "PACKAGE_LOGGER", "configure_logger"]
