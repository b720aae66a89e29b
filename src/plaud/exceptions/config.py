"""
Configuration-related exceptions.

All exceptions related to configuration parsing, validation, and management.
"""

from pathlib import Path
from typing import Any, List, Optional, Union

from .base import ExceptionContext, PlaudError
from .templates import ErrorCodes, ErrorMessageTemplates


class ConfigurationError(PlaudError):
    """Base class for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration contains invalid values."""

    def __init__(self, field: str, value: Any, expected: str):
        self.field = field
        self.value = value
        self.expected = expected
        message = ErrorMessageTemplates.CONFIG_INVALID.format(
            field=field, value=value, expected=expected
        )
        context = ExceptionContext(
            help_text=f"Check the '{field}' setting; expected {expected}",
            error_code=ErrorCodes.CONFIG_INVALID,
        )
        super().__init__(message, context)


class MissingConfigurationError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, field: str, config_location: Optional[str] = None):
        self.field = field
        message = ErrorMessageTemplates.CONFIG_MISSING.format(field=field)
        help_text = f"Set the PLAUD_{field.upper()} environment variable"
        if config_location:
            help_text += f" or add it to {config_location}"
        context = ExceptionContext(
            help_text=help_text,
            error_code=ErrorCodes.CONFIG_MISSING,
        )
        super().__init__(message, context)


class ConfigurationValidationError(ConfigurationError):
    """Raised when configuration fails validation."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        message = "Configuration validation failed:"
        for error in errors:
            message += f"\n  - {error}"
        context = ExceptionContext(
            help_text="Fix the listed configuration problems and try again",
            error_code=ErrorCodes.CONFIG_VALIDATION_ERROR,
        )
        super().__init__(message, context)


class ConfigurationFileError(ConfigurationError):
    """Raised when a configuration file cannot be read or written."""

    def __init__(self, file_path: Union[str, Path], details: str):
        self.file_path = Path(file_path)
        message = ErrorMessageTemplates.CONFIG_FILE_ERROR.format(
            file_path=file_path, details=details
        )
        context = ExceptionContext(
            help_text="Check that the file exists, is readable and is valid TOML",
            error_code=ErrorCodes.CONFIG_FILE_ERROR,
        )
        super().__init__(message, context)
