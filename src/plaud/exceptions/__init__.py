"""
Plaud Exception Hierarchy

Exception Hierarchy:
    PlaudError (base)
    ├── PlaudApiError
    │   ├── PlaudTransportError
    │   ├── PlaudStatusError
    │   └── PlaudParseError
    └── ConfigurationError
        ├── InvalidConfigurationError
        ├── MissingConfigurationError
        ├── ConfigurationValidationError
        └── ConfigurationFileError

This package provides focused exception components:
- base: Core PlaudError base class
- api: Errors raised by client calls
- config: Configuration exceptions
- templates: Message templates and error codes
"""

from .api import PlaudApiError, PlaudParseError, PlaudStatusError, PlaudTransportError
from .base import ExceptionContext, PlaudError
from .config import (
    ConfigurationError,
    ConfigurationFileError,
    ConfigurationValidationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)

__all__ = [
    # Base
    "PlaudError",
    "ExceptionContext",
    # API
    "PlaudApiError",
    "PlaudTransportError",
    "PlaudStatusError",
    "PlaudParseError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "ConfigurationValidationError",
    "ConfigurationFileError",
]
