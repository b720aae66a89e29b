"""
Behavior shared by the blocking and asynchronous Plaud clients.

Both clients build the same requests and read responses the same way; only
the transport differs. Everything here is free of I/O.
"""

from contextlib import contextmanager
from functools import lru_cache
from typing import Any, Dict, Optional, Tuple, Type

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from plaud.constants import (
    HTTP_SUCCESS_MAX,
    HTTP_SUCCESS_MIN,
    AuthConstants,
    ContentTypes,
    Endpoints,
)
from plaud.core.security import CredentialSanitizer
from plaud.exceptions import (
    PlaudApiError,
    PlaudParseError,
    PlaudStatusError,
    PlaudTransportError,
)
from plaud.logging import get_logger
from plaud.models import AuthResponse


@lru_cache(maxsize=256)
def _adapter_for(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def is_success_status(status_code: int) -> bool:
    """True for 2xx status codes."""
    return HTTP_SUCCESS_MIN <= status_code <= HTTP_SUCCESS_MAX


def describe_exception(exc: BaseException) -> str:
    """Message of an exception, falling back to its type name when empty."""
    return str(exc) or exc.__class__.__name__


class PlaudApiBase:
    """Request construction, response parsing and error wrapping."""

    # Raised by the concrete transport for network-level failures
    transport_errors: Tuple[Type[BaseException], ...] = ()

    def __init__(
        self,
        base_url: str = Endpoints.BASE_URL,
        auth_path: str = Endpoints.AUTHENTICATION,
        client_id: str = AuthConstants.CLIENT_ID,
    ):
        self.base_url = base_url.rstrip("/")
        self.auth_path = auth_path
        self.client_id = client_id
        self.logger = get_logger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    # Requests

    def _auth_form(self, username: str, password: str) -> Dict[str, str]:
        return {
            "username": username,
            "password": password,
            "client_id": self.client_id,
        }

    @staticmethod
    def _auth_headers() -> Dict[str, str]:
        return {"Accept": ContentTypes.JSON}

    @staticmethod
    def _bearer_headers(access_token: str, has_body: bool = False) -> Dict[str, str]:
        """Headers for one authenticated request; never shared between calls."""
        headers = {
            "Authorization": f"Bearer {access_token}",
            "Accept": ContentTypes.JSON,
        }
        if has_body:
            headers["Content-Type"] = ContentTypes.JSON_UTF8
        return headers

    @staticmethod
    def _serialize(method: str, payload: Any) -> bytes:
        """Encode a payload as JSON; pydantic models use their wire aliases."""
        try:
            return to_json(payload, by_alias=True)
        except PydanticSerializationError as e:
            raise PlaudApiError(method, f"Payload is not JSON serializable: {e}") from e

    # Responses

    @staticmethod
    def _parse(method: str, text: str, response_type: Any = None) -> Any:
        """Read a response body as ``response_type``.

        An empty body and a JSON null both yield None, whatever the response
        type. Without a response type the decoded JSON value is returned as-is.
        """
        if not text or text.strip() in ("", "null"):
            return None
        adapter = _adapter_for(Any if response_type is None else response_type)
        try:
            return adapter.validate_json(text)
        except ValidationError as e:
            raise PlaudParseError(method, describe_exception(e), body=text) from e

    @staticmethod
    def _ensure_success(method: str, status_code: int, reason: Optional[str], body: str) -> None:
        if not is_success_status(status_code):
            raise PlaudStatusError(method, status_code, reason, body)

    def _parse_auth(self, text: str) -> AuthResponse:
        result = self._parse("authenticate", text, AuthResponse)
        if result is None:
            raise PlaudParseError("authenticate", "Empty authentication response", body=text)
        return result

    # Errors

    @contextmanager
    def _call_boundary(self, method: str):
        """Convert anything raised inside a client call into a PlaudApiError."""
        try:
            yield
        except PlaudApiError as e:
            self.logger.error(e.message, **e.log_fields())
            raise
        except self.transport_errors as e:
            error = PlaudTransportError(method, describe_exception(e))
            self.logger.error(error.message, **error.log_fields())
            raise error from e
        except Exception as e:
            error = PlaudApiError(method, describe_exception(e))
            self.logger.error(error.message, **error.log_fields())
            raise error from e

    def _mask(self, username: str) -> str:
        return CredentialSanitizer.mask_credential((username or "").strip())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url!r})"
