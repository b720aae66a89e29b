"""
Logger wrapper with correlation IDs and structured context.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Optional
from uuid import uuid4


class PlaudLogger:
    """Logger with a correlation id and structured extra context."""

    def __init__(self, name: str, correlation_id: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id or str(uuid4())
        self.extra_context = {}

    def _log(self, level: int, msg: str, exc_info: bool = False, **kwargs):
        extra = {"correlation_id": self.correlation_id}
        context = self.extra_context.copy()
        context.update(kwargs)
        if context:
            extra["extra_context"] = context
        self.logger.log(level, msg, exc_info=exc_info, extra=extra)

    def debug(self, msg: str, **kwargs):
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs):
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs):
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs):
        self._log(logging.ERROR, msg, **kwargs)

    def exception(self, msg: str, **kwargs):
        """Log an error with the active exception's traceback."""
        self._log(logging.ERROR, msg, exc_info=True, **kwargs)

    def isEnabledFor(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)

    def with_context(self, **kwargs) -> "PlaudLogger":
        """Create a copy of this logger with additional context."""
        new_logger = PlaudLogger(self.logger.name, self.correlation_id)
        new_logger.extra_context = self.extra_context.copy()
        new_logger.extra_context.update(kwargs)
        return new_logger

    @contextmanager
    def temp_context(self, **kwargs):
        """Context manager for temporary context (keyword arguments)."""
        original_context = self.extra_context.copy()
        self.extra_context.update(kwargs)
        try:
            yield self
        finally:
            self.extra_context = original_context

    def __repr__(self) -> str:
        return f"PlaudLogger(name={self.logger.name!r}, correlation_id={self.correlation_id!r})"
