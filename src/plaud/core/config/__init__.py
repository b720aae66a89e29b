"""Configuration models and loading for the Plaud client."""

from .manager import ConfigManager, EnvironmentOverride
from .models import (
    ApiConfig,
    CredentialsConfig,
    LoggingSettingsConfig,
    LogLevel,
    PlaudConfig,
    PlaudSettings,
)

__all__ = [
    "ConfigManager",
    "EnvironmentOverride",
    "PlaudConfig",
    "PlaudSettings",
    "ApiConfig",
    "CredentialsConfig",
    "LoggingSettingsConfig",
    "LogLevel",
]
