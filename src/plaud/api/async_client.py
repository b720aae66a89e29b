"""
Asynchronous Plaud API client.

Example::

    async with AsyncPlaudApi() as api:
        auth = await api.authenticate("me@example.com", "secret")
        header = await api.get_data(
            "/ai/content/header", auth.access_token, response_type=AiContentHeader
        )
"""

from typing import Any, Optional, Type, TypeVar

import httpx

from plaud.constants import AuthConstants, Endpoints
from plaud.core.config import PlaudConfig
from plaud.infrastructure.http import AsyncHttpClient
from plaud.logging import LoggingContext
from plaud.models import AuthResponse

from .base import PlaudApiBase, is_success_status

T = TypeVar("T")


class AsyncPlaudApi(PlaudApiBase):
    """Non-blocking client for the Plaud web API.

    Each call is one independent request. Authorization headers are built
    per request, so one instance can serve concurrent calls made with
    different tokens.
    """

    transport_errors = (httpx.HTTPError, httpx.InvalidURL)

    def __init__(
        self,
        base_url: str = Endpoints.BASE_URL,
        auth_path: str = Endpoints.AUTHENTICATION,
        client_id: str = AuthConstants.CLIENT_ID,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            base_url: Service root address
            auth_path: Path of the access-token endpoint
            client_id: Client identifier sent with credentials
            timeout: Request timeout in seconds, None for no timeout
            http_client: Existing httpx.AsyncClient to reuse (not closed by us)
            transport: Transport for the internally created client
        """
        super().__init__(base_url, auth_path, client_id)
        self.http = AsyncHttpClient(
            self.base_url, client=http_client, timeout=timeout, transport=transport
        )

    @classmethod
    def from_config(cls, config: PlaudConfig, **kwargs) -> "AsyncPlaudApi":
        """Create a client from a loaded PlaudConfig."""
        return cls(
            base_url=config.api.base_url,
            auth_path=config.api.auth_path,
            client_id=config.api.client_id,
            timeout=config.api.timeout,
            **kwargs,
        )

    async def authenticate(self, username: str, password: str) -> AuthResponse:
        """Exchange credentials for an access token.

        Raises:
            PlaudApiError: on transport failure, a non-2xx status, or a body
                without an access token.
        """
        with self._call_boundary("authenticate"), LoggingContext(
            entry_msg=f"Authenticating {self._mask(username)} ...",
            success_msg="Authenticated.",
            logger=self.logger,
        ):
            response = await self.http.post(
                self.auth_path,
                data=self._auth_form(username, password),
                headers=self._auth_headers(),
            )
            self._ensure_success(
                "authenticate", response.status_code, response.reason_phrase, response.text
            )
            return self._parse_auth(response.text)

    async def get_data(
        self,
        endpoint: str,
        access_token: str,
        response_type: Optional[Type[T]] = None,
    ) -> T:
        """GET ``endpoint`` and read the body as ``response_type``.

        The status code is not checked; an error body is parsed like any
        other and may yield an empty result or a PlaudParseError.
        """
        with self._call_boundary("get_data"):
            response = await self.http.get(
                endpoint, headers=self._bearer_headers(access_token)
            )
            return self._parse("get_data", response.text, response_type)

    async def post_data(
        self,
        endpoint: str,
        payload: Any,
        access_token: str,
        response_type: Optional[Type[T]] = None,
    ) -> T:
        """POST ``payload`` as JSON and read the body as ``response_type``.

        The status code is not checked.
        """
        with self._call_boundary("post_data"):
            response = await self.http.post(
                endpoint,
                data=self._serialize("post_data", payload),
                headers=self._bearer_headers(access_token, has_body=True),
            )
            return self._parse("post_data", response.text, response_type)

    async def post_data_no_body(self, endpoint: str, payload: Any, access_token: str) -> bool:
        """POST ``payload`` as JSON; True when the status is 2xx."""
        with self._call_boundary("post_data_no_body"):
            response = await self.http.post(
                endpoint,
                data=self._serialize("post_data_no_body", payload),
                headers=self._bearer_headers(access_token, has_body=True),
            )
            return is_success_status(response.status_code)

    async def delete_with_body(self, endpoint: str, payload: Any, access_token: str) -> bool:
        """DELETE with ``payload`` as a JSON body; True when the status is 2xx."""
        with self._call_boundary("delete_with_body"):
            response = await self.http.delete(
                endpoint,
                data=self._serialize("delete_with_body", payload),
                headers=self._bearer_headers(access_token, has_body=True),
            )
            return is_success_status(response.status_code)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "AsyncPlaudApi":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.aclose()
