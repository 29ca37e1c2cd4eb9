"""Shared state populated by the CLI callback."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from faultline.config import ConfigurationError, FaultlineSettings
from faultline.core.handlers.error_handler import ErrorHandler
from faultline.discovery.error_handler_factory import ErrorHandlerFactory

state: Dict[str, Any] = {"settings": None}


def current_settings() -> FaultlineSettings:
    """Return the settings loaded by the callback, or defaults."""
    return state["settings"] or FaultlineSettings()


def error_handler_for(packages: Optional[Sequence[str]]) -> ErrorHandler:
    """Build an error handler for ``packages`` or the configured base packages.

    Raises:
        ConfigurationError: If no package is given and none is configured.
        FaultlineError: If discovery or binding fails.
    """
    settings = current_settings()
    selected = list(packages or settings.base_packages)
    if not selected:
        raise ConfigurationError(
            "No handler package given; pass one or set FAULTLINE_BASE_PACKAGES"
        )
    factory = ErrorHandlerFactory(default_status_code=settings.default_status_code)
    return factory.create_error_handler(*selected)


__all__ = ["current_settings", "error_handler_for", "state"]
