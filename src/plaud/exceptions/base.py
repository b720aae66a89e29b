"""
Root of the Plaud client exception hierarchy.

Every error carries a short correlation id so that a message shown to a
user can be matched with the log line written when it was raised.
"""

import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional


@dataclass
class ExceptionContext:
    """Optional extras attached to a PlaudError."""

    help_text: Optional[str] = None
    error_code: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)
    technical_details: Optional[str] = None
    correlation_id: Optional[str] = None

    def copy(self) -> "ExceptionContext":
        return replace(self, context=dict(self.context))


class PlaudError(Exception):
    """Base exception for all Plaud client errors.

    ``context`` holds the request facts known when the error was raised
    (``method``, ``http_code``, ...). The ExceptionContext passed in is
    copied, never modified.
    """

    def __init__(self, message: str, context: Optional[ExceptionContext] = None):
        context = context.copy() if context is not None else ExceptionContext()
        self.message = message
        self.help_text = context.help_text
        self.error_code = context.error_code
        self.context = context.context
        self.technical_details = context.technical_details
        self.correlation_id = context.correlation_id or uuid.uuid4().hex[:8]
        super().__init__(message)

    def __str__(self) -> str:
        lines = [self.message]
        facts = ", ".join(f"{k}={v}" for k, v in self.context.items() if v is not None)
        if facts:
            lines.append(f"  request: {facts}")
        if self.technical_details:
            lines.append(f"  details: {self.technical_details}")
        if self.help_text:
            lines.append(f"  hint: {self.help_text}")
        lines.append(f"  error id: {self.correlation_id}")
        return "\n".join(lines)

    def log_fields(self) -> Dict[str, Any]:
        """Structured fields for the log record written alongside this error."""
        fields = {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "error_id": self.correlation_id,
        }
        fields.update(self.context)
        return fields
