"""
Configuration models for the Plaud client.

Pydantic models provide validation and defaults for everything the client
reads from TOML files or the environment.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from plaud.constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    DEFAULT_TIMEOUT_SECONDS,
    MIN_LOG_FILE_SIZE_BYTES,
    AuthConstants,
    Endpoints,
)


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ApiConfig(BaseModel):
    """Where and how the client talks to the service."""

    base_url: str = Field(Endpoints.BASE_URL, description="Service root address")
    auth_path: str = Field(
        Endpoints.AUTHENTICATION, description="Path of the access-token endpoint"
    )
    client_id: str = Field(
        AuthConstants.CLIENT_ID, description="Client identifier sent when authenticating"
    )
    timeout: Optional[float] = Field(
        DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Request timeout in seconds (unset means no timeout)",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")


class CredentialsConfig(BaseModel):
    """Account credentials; kept in memory only."""

    username: Optional[str] = Field(None, description="Plaud account username")
    password: Optional[str] = Field(None, description="Plaud account password")

    @field_validator("username", "password")
    @classmethod
    def validate_credentials(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v.strip()) == 0:
            return None
        return v

    @model_validator(mode="after")
    def validate_credentials_together(self) -> "CredentialsConfig":
        if (self.username is None) != (self.password is None):
            raise ValueError("Both username and password must be provided together")
        return self

    @property
    def is_complete(self) -> bool:
        return self.username is not None and self.password is not None

    def __repr__(self) -> str:
        return f"CredentialsConfig(username={self.username!r}, password='***')"


class LoggingSettingsConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Logging level")
    format: str = Field("console", description="Log format: console, json, rich")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(
        DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=MIN_LOG_FILE_SIZE_BYTES,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        DEFAULT_LOG_BACKUP_COUNT,
        ge=1,
        le=20,
        description="Number of backup log files to keep",
    )

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ["console", "json", "rich"]:
            raise ValueError("format must be one of: console, json, rich")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: List[str]) -> List[str]:
        valid_outputs = {"console", "file"}
        for output in v:
            if output not in valid_outputs:
                raise ValueError(
                    f"output must contain only: {', '.join(sorted(valid_outputs))}"
                )
        return v


class PlaudConfig(BaseModel):
    """Main Plaud client configuration model."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    credentials: CredentialsConfig = Field(default_factory=CredentialsConfig)
    logging: LoggingSettingsConfig = Field(default_factory=LoggingSettingsConfig)

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }


class PlaudSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    plaud_base_url: Optional[str] = Field(None, alias="PLAUD_BASE_URL")
    plaud_auth_path: Optional[str] = Field(None, alias="PLAUD_AUTH_PATH")
    plaud_client_id: Optional[str] = Field(None, alias="PLAUD_CLIENT_ID")
    plaud_timeout: Optional[float] = Field(None, alias="PLAUD_TIMEOUT")

    plaud_username: Optional[str] = Field(None, alias="PLAUD_USERNAME")
    plaud_password: Optional[str] = Field(None, alias="PLAUD_PASSWORD")

    plaud_log_level: Optional[str] = Field(None, alias="PLAUD_LOG_LEVEL")
    plaud_log_format: Optional[str] = Field(None, alias="PLAUD_LOG_FORMAT")
    plaud_log_output: Optional[str] = Field(None, alias="PLAUD_LOG_OUTPUT")
    plaud_log_file_path: Optional[str] = Field(None, alias="PLAUD_LOG_FILE_PATH")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )
