"""
Plaud Logging Package

Logging support for the Plaud client, built on the standard library:
- config: Logging configuration
- formatters: Log formatting (JSON, console, rich)
- loggers: Logger wrapper with correlation IDs
- manager: Centralized logging setup
- context: Entry/success/failure logging around an operation
"""

from .config import DEFAULT_LOG_FILE, LoggingConfig
from .context import LoggingContext
from .formatters import StructuredFormatter, create_console_formatter, create_rich_handler
from .loggers import PlaudLogger
from .manager import LoggingManager, configure_logging, logging_manager

get_logger = logging_manager.get_logger

__all__ = [
    "LoggingConfig",
    "DEFAULT_LOG_FILE",
    "LoggingManager",
    "configure_logging",
    "logging_manager",
    "PlaudLogger",
    "get_logger",
    "LoggingContext",
    "StructuredFormatter",
    "create_console_formatter",
    "create_rich_handler",
]
