"""
Configuration manager for the Plaud client.

Loads a TOML file, applies environment overrides and validates the result
into a PlaudConfig.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w
from pydantic import ValidationError

from plaud.exceptions.config import (
    ConfigurationFileError,
    ConfigurationValidationError,
    MissingConfigurationError,
)
from plaud.logging import LoggingConfig

from .models import PlaudConfig, PlaudSettings

DEFAULT_CONFIG_FILE = Path.home() / ".config" / "plaud" / "config.toml"


@dataclass
class EnvironmentOverride:
    """Helper for applying environment variable overrides."""
    config_section: Dict[str, Any]
    settings: PlaudSettings

    def apply_if_set(self, setting_name: str, config_key: str) -> None:
        """Apply setting if it's set in environment."""
        value = getattr(self.settings, setting_name, None)
        if value is not None:
            self.config_section[config_key] = value

    def apply_string_if_set(self, setting_name: str, config_key: str) -> None:
        """Apply string setting if it's set and non-empty."""
        value = getattr(self.settings, setting_name, None)
        if value:
            self.config_section[config_key] = value


class ConfigManager:
    """Loads, validates, caches and saves the client configuration."""

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_file: Path to a TOML config file. If None, uses
                ``~/.config/plaud/config.toml`` when it exists.
        """
        self.config_file = Path(config_file) if config_file else DEFAULT_CONFIG_FILE
        self._config: Optional[PlaudConfig] = None

    @property
    def config_directory(self) -> Path:
        return self.config_file.parent

    def load_config(self) -> PlaudConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}
        if self.config_file.exists():
            config_data = self._load_toml_file()

        config_data = self._apply_env_overrides(config_data)

        try:
            self._config = PlaudConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationValidationError(
                [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
            ) from e

        return self._config

    def reset_config(self) -> None:
        """Drop the cached configuration so the next load re-reads sources."""
        self._config = None

    def _load_toml_file(self) -> Dict[str, Any]:
        """Load configuration from TOML file."""
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationFileError(self.config_file, f"Invalid TOML syntax: {e}") from e
        except OSError as e:
            raise ConfigurationFileError(self.config_file, str(e)) from e

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        settings = PlaudSettings()

        for section in ("api", "credentials", "logging"):
            config_data.setdefault(section, {})

        api = EnvironmentOverride(config_data["api"], settings)
        api.apply_string_if_set("plaud_base_url", "base_url")
        api.apply_string_if_set("plaud_auth_path", "auth_path")
        api.apply_string_if_set("plaud_client_id", "client_id")
        api.apply_if_set("plaud_timeout", "timeout")

        credentials = EnvironmentOverride(config_data["credentials"], settings)
        credentials.apply_string_if_set("plaud_username", "username")
        credentials.apply_string_if_set("plaud_password", "password")

        logging_section = EnvironmentOverride(config_data["logging"], settings)
        logging_section.apply_string_if_set("plaud_log_level", "level")
        logging_section.apply_string_if_set("plaud_log_format", "format")
        logging_section.apply_string_if_set("plaud_log_file_path", "file_path")
        if settings.plaud_log_output:
            # Comma-separated list of outputs
            config_data["logging"]["output"] = [
                o.strip() for o in settings.plaud_log_output.split(",")
            ]

        return config_data

    def _remove_none_values(self, data):
        """Recursively remove None values; TOML has no null."""
        if isinstance(data, dict):
            return {k: self._remove_none_values(v) for k, v in data.items() if v is not None}
        elif isinstance(data, list):
            return [self._remove_none_values(item) for item in data if item is not None]
        else:
            return data

    def save_config(self, config: Optional[PlaudConfig] = None) -> None:
        """Save configuration to the TOML file. Credentials are never written."""
        if config is None:
            config = self.load_config()

        config_dict = config.model_dump(mode="json", exclude={"credentials"})
        config_dict = self._remove_none_values(config_dict)

        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "wb") as f:
                tomli_w.dump(config_dict, f)
        except OSError as e:
            raise ConfigurationFileError(self.config_file, str(e)) from e

        self._config = config

    def get_credentials(self) -> tuple:
        """Return (username, password), raising if either is missing."""
        credentials = self.load_config().credentials
        if not credentials.username:
            raise MissingConfigurationError("username", str(self.config_file))
        if not credentials.password:
            raise MissingConfigurationError("password", str(self.config_file))
        return credentials.username, credentials.password

    def get_logging_config(self) -> LoggingConfig:
        """Build the logging package configuration from the loaded settings."""
        from plaud import __version__

        return LoggingConfig.from_settings(self.load_config().logging, version=__version__)
