"""
Settings Loader

This module loads :class:`FaultlineSettings` from an optional YAML file and
applies overrides taken from environment variables.

Lookup order (later sources win):

1. Built-in defaults.
2. The YAML file given explicitly or through ``FAULTLINE_CONFIG_PATH``.
3. ``FAULTLINE_BASE_PACKAGES`` (comma separated), ``FAULTLINE_DEFAULT_STATUS``
   and ``FAULTLINE_LOG_LEVEL``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from .configuration_error import ConfigurationError
from .settings import FaultlineSettings

logger = logging.getLogger(__name__)

CONFIG_PATH_VARIABLE = "FAULTLINE_CONFIG_PATH"

ENVIRONMENT_OVERRIDES = {
    "FAULTLINE_BASE_PACKAGES": "base_packages",
    "FAULTLINE_DEFAULT_STATUS": "default_status_code",
    "FAULTLINE_LOG_LEVEL": "log_level",
}


def load_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        path: Path to the configuration file.

    Returns:
        The configuration mapping. An empty document yields an empty mapping.

    Raises:
        ConfigurationError: If the file does not exist, cannot be parsed, or
            does not contain a mapping.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise ConfigurationError(f"Configuration file not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Error loading configuration file {file_path}: {e}") from e

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Configuration file {file_path} must contain a mapping, not {type(config).__name__}"
        )

    logger.debug("Loaded configuration from %s", file_path)
    return config


def _environment_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for variable, field_name in ENVIRONMENT_OVERRIDES.items():
        value = environ.get(variable)
        if value is None or value == "":
            continue
        overrides[field_name] = value
        logger.debug("Overriding %s from %s", field_name, variable)
    return overrides


def load_settings(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> FaultlineSettings:
    """
    Load settings from YAML and the environment.

    Args:
        path: Optional YAML file. Defaults to ``FAULTLINE_CONFIG_PATH`` when
            set, otherwise no file is read.
        environ: Environment mapping, ``os.environ`` by default.

    Returns:
        The validated settings.

    Raises:
        ConfigurationError: If the file cannot be loaded or the resulting
            values are invalid.
    """
    environ = os.environ if environ is None else environ
    path = path or environ.get(CONFIG_PATH_VARIABLE) or None

    values: Dict[str, Any] = load_config_file(path) if path else {}
    values.update(_environment_overrides(environ))

    try:
        settings = FaultlineSettings.model_validate(values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid faultline settings: {e}") from e

    logger.debug("Using settings %s", settings.model_dump())
    return settings


__all__ = ["CONFIG_PATH_VARIABLE", "ENVIRONMENT_OVERRIDES", "load_config_file", "load_settings"]
