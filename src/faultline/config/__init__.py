"""Configuration loading for faultline."""

from .configuration_error import ConfigurationError
from .loader import load_config_file, load_settings
from .settings import FaultlineSettings

__all__ = ["ConfigurationError", "FaultlineSettings", "load_config_file", "load_settings"]
