"""Tests for :class:`FaultlineSettings` validation."""

import logging

import pytest
from pydantic import ValidationError

from faultline.config import FaultlineSettings


def test_defaults():
    settings = FaultlineSettings()

    assert settings.base_packages == []
    assert settings.default_status_code == 500
    assert settings.log_level == "INFO"
    assert settings.log_level_value == logging.INFO


def test_comma_separated_packages_are_split():
    settings = FaultlineSettings(base_packages="myapp.errors, other.handlers ,")

    assert settings.base_packages == ["myapp.errors", "other.handlers"]


def test_log_level_is_normalised():
    assert FaultlineSettings(log_level="debug").log_level == "DEBUG"


@pytest.mark.parametrize(
    "values",
    [
        {"default_status_code": 99},
        {"default_status_code": 600},
        {"log_level": "LOUD"},
        {"base_packages": ["not a package"]},
        {"unexpected": True},
    ],
)
def test_invalid_values_are_rejected(values):
    with pytest.raises(ValidationError):
        FaultlineSettings(**values)
