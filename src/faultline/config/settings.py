"""Settings controlling how error handlers are built."""

from __future__ import annotations

import logging
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from faultline.core.handlers.default_root_handler import DEFAULT_STATUS_CODE


class FaultlineSettings(BaseModel):
    """Validated settings for handler discovery and logging.

    Attributes:
        base_packages: Packages scanned for marked handlers.
        default_status_code: Status code of the fallback root handler.
        log_level: Name of the logging level used by the command line.
    """

    model_config = ConfigDict(extra="forbid")

    base_packages: List[str] = Field(default_factory=list)
    default_status_code: int = Field(default=DEFAULT_STATUS_CODE, ge=100, le=599)
    log_level: str = "INFO"

    @field_validator("base_packages", mode="before")
    def split_packages(cls, v):
        if isinstance(v, str):
            return [package.strip() for package in v.split(",") if package.strip()]
        return v

    @field_validator("base_packages")
    def validate_packages(cls, v):
        for package in v:
            if not package or any(not part.isidentifier() for part in package.split(".")):
                raise ValueError(f"'{package}' is not a valid package name")
        return v

    @field_validator("log_level", mode="before")
    def validate_log_level(cls, v):
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{v}'")
        return level

    @property
    def log_level_value(self) -> int:
        """Return the numeric logging level."""

        return logging.getLevelName(self.log_level)


__all__ = ["FaultlineSettings"]
