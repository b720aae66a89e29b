"""
API call exceptions.

Every failure inside a client method surfaces as a PlaudApiError carrying
the name of the method that failed and the underlying message. The
subclasses identify the cause without callers having to parse text.
"""

from typing import Optional

from .base import ExceptionContext, PlaudError
from .templates import ErrorCodes, ErrorMessageTemplates, RecoverySuggestions


class PlaudApiError(PlaudError):
    """Raised when a client call fails for any reason."""

    def __init__(
        self,
        method: str,
        message: str,
        context: Optional[ExceptionContext] = None,
    ):
        self.method = method
        self.detail = message
        if context is None:
            context = ExceptionContext(error_code=ErrorCodes.API_ERROR)
        super().__init__(
            ErrorMessageTemplates.API_ERROR.format(method=method, message=message),
            context,
        )
        self.context = {"method": method, **self.context}


class PlaudTransportError(PlaudApiError):
    """Raised when the request could not be sent or no response arrived."""

    def __init__(self, method: str, message: str):
        suggestions = RecoverySuggestions.for_transport_error()
        context = ExceptionContext(
            help_text=suggestions[0],
            error_code=ErrorCodes.API_TRANSPORT_FAILED,
        )
        super().__init__(method, message, context)


class PlaudStatusError(PlaudApiError):
    """Raised when a checked call receives a non-2xx status."""

    def __init__(
        self,
        method: str,
        status_code: int,
        reason: Optional[str] = None,
        body: Optional[str] = None,
    ):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        message = ErrorMessageTemplates.STATUS_ERROR.format(
            status_code=status_code,
            reason=reason or ErrorMessageTemplates.EMPTY_REASON,
        )
        technical_details = None
        if status_code == 401:
            technical_details = "HTTP 401 Unauthorized - Invalid credentials or token"
        elif status_code == 403:
            technical_details = "HTTP 403 Forbidden - Insufficient permissions"
        elif status_code == 429:
            technical_details = "HTTP 429 Too Many Requests - Rate limited"

        context = ExceptionContext(
            help_text=RecoverySuggestions.for_status_error(status_code)[0],
            error_code=ErrorCodes.API_STATUS_FAILED,
            context={"http_code": status_code},
            technical_details=technical_details,
        )
        super().__init__(method, message, context)


class PlaudParseError(PlaudApiError):
    """Raised when a response body cannot be read as the requested type."""

    def __init__(self, method: str, message: str, body: Optional[str] = None):
        self.body = body
        context = ExceptionContext(
            help_text=RecoverySuggestions.for_parse_error()[0],
            error_code=ErrorCodes.API_PARSE_FAILED,
        )
        super().__init__(method, message, context)
