"""Tests for loading settings from YAML and environment variables."""

import pytest

from faultline.config import ConfigurationError, load_config_file, load_settings


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "faultline.yaml"
    path.write_text(
        "base_packages:\n  - myapp.errors\ndefault_status_code: 503\nlog_level: warning\n",
        encoding="utf-8",
    )
    return path


def test_defaults_without_file_or_environment():
    settings = load_settings(environ={})

    assert settings.base_packages == []
    assert settings.default_status_code == 500


def test_values_are_read_from_yaml(config_file):
    settings = load_settings(config_file, environ={})

    assert settings.base_packages == ["myapp.errors"]
    assert settings.default_status_code == 503
    assert settings.log_level == "WARNING"


def test_config_path_from_environment(config_file):
    settings = load_settings(environ={"FAULTLINE_CONFIG_PATH": str(config_file)})

    assert settings.default_status_code == 503


def test_environment_overrides_file(config_file):
    environ = {
        "FAULTLINE_BASE_PACKAGES": "a.handlers,b.handlers",
        "FAULTLINE_DEFAULT_STATUS": "502",
        "FAULTLINE_LOG_LEVEL": "DEBUG",
    }

    settings = load_settings(config_file, environ=environ)

    assert settings.base_packages == ["a.handlers", "b.handlers"]
    assert settings.default_status_code == 502
    assert settings.log_level == "DEBUG"


def test_os_environ_is_used_by_default(monkeypatch):
    monkeypatch.delenv("FAULTLINE_CONFIG_PATH", raising=False)
    monkeypatch.setenv("FAULTLINE_DEFAULT_STATUS", "504")

    assert load_settings().default_status_code == 504


def test_empty_file_yields_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config_file(path) == {}


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_settings(tmp_path / "absent.yaml", environ={})


def test_malformed_yaml_raises(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("base_packages: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Error loading"):
        load_settings(path, environ={})


def test_non_mapping_document_raises(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="must contain a mapping"):
        load_settings(path, environ={})


def test_invalid_values_raise_configuration_error():
    with pytest.raises(ConfigurationError, match="Invalid faultline settings") as info:
        load_settings(environ={"FAULTLINE_DEFAULT_STATUS": "abc"})

    assert info.value.__cause__ is not None
