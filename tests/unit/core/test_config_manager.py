"""
Unit tests for ConfigManager: TOML loading, environment overrides, saving.
"""

import logging
import sys

import pytest

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from plaud.core.config import ConfigManager, PlaudConfig
from plaud.exceptions import (
    ConfigurationFileError,
    ConfigurationValidationError,
    MissingConfigurationError,
)


@pytest.fixture
def config_manager(config_file, clean_environment):
    return ConfigManager(config_file)


class TestLoadConfig:
    def test_defaults_without_file(self, config_manager):
        config = config_manager.load_config()

        assert isinstance(config, PlaudConfig)
        assert config.api.base_url == "https://api.plaud.ai"

    def test_reads_toml_file(self, config_manager, config_file):
        config_file.write_text(
            '[api]\nbase_url = "https://eu.plaud.test"\ntimeout = 15\n\n'
            '[logging]\nlevel = "DEBUG"\n'
        )

        config = config_manager.load_config()

        assert config.api.base_url == "https://eu.plaud.test"
        assert config.api.timeout == 15
        assert config.logging.level.value == "DEBUG"

    def test_caches_until_reset(self, config_manager, config_file):
        first = config_manager.load_config()
        config_file.write_text('[api]\nclient_id = "desktop"\n')

        assert config_manager.load_config() is first
        config_manager.reset_config()
        assert config_manager.load_config().api.client_id == "desktop"

    def test_invalid_toml_raises_file_error(self, config_manager, config_file):
        config_file.write_text("[api\nbase_url = ")

        with pytest.raises(ConfigurationFileError, match="Invalid TOML syntax"):
            config_manager.load_config()

    def test_invalid_values_raise_validation_error(self, config_manager, config_file):
        config_file.write_text('[logging]\nformat = "xml"\n')

        with pytest.raises(ConfigurationValidationError) as exc_info:
            config_manager.load_config()

        assert any(e.startswith("logging.format") for e in exc_info.value.errors)


class TestEnvironmentOverrides:
    def test_env_overrides_file(self, config_manager, config_file, monkeypatch):
        config_file.write_text('[api]\nbase_url = "https://file.plaud.test"\n')
        monkeypatch.setenv("PLAUD_BASE_URL", "https://env.plaud.test")
        monkeypatch.setenv("PLAUD_TIMEOUT", "2.5")
        monkeypatch.setenv("PLAUD_USERNAME", "me@example.com")
        monkeypatch.setenv("PLAUD_PASSWORD", "secret")
        monkeypatch.setenv("PLAUD_LOG_OUTPUT", "console, file")

        config = config_manager.load_config()

        assert config.api.base_url == "https://env.plaud.test"
        assert config.api.timeout == 2.5
        assert config.credentials.username == "me@example.com"
        assert config.logging.output == ["console", "file"]

    def test_get_credentials(self, config_manager, monkeypatch):
        monkeypatch.setenv("PLAUD_USERNAME", "me@example.com")
        monkeypatch.setenv("PLAUD_PASSWORD", "secret")

        assert config_manager.get_credentials() == ("me@example.com", "secret")

    def test_get_credentials_missing(self, config_manager):
        with pytest.raises(MissingConfigurationError, match="username"):
            config_manager.get_credentials()


class TestSaveConfig:
    def test_writes_toml_without_credentials(self, config_manager, config_file, monkeypatch):
        monkeypatch.setenv("PLAUD_USERNAME", "me@example.com")
        monkeypatch.setenv("PLAUD_PASSWORD", "secret")
        config = config_manager.load_config()

        config_manager.save_config(config)

        with open(config_file, "rb") as f:
            saved = tomllib.load(f)
        assert "credentials" not in saved
        assert saved["api"]["base_url"] == "https://api.plaud.ai"
        assert "timeout" not in saved["api"]
        assert "secret" not in config_file.read_text()

    def test_saved_file_loads_back(self, config_file, clean_environment):
        manager = ConfigManager(config_file)
        config = PlaudConfig(api={"base_url": "https://eu.plaud.test", "timeout": 9})
        manager.save_config(config)

        reloaded = ConfigManager(config_file).load_config()
        assert reloaded.api == config.api


class TestLoggingConfig:
    def test_builds_logging_config(self, config_manager, config_file):
        config_file.write_text('[logging]\nlevel = "WARNING"\nformat = "json"\n')

        logging_config = config_manager.get_logging_config()

        assert logging_config.level == logging.WARNING
        assert logging_config.format_type == "json"
        assert logging_config.service_name == "plaud"
