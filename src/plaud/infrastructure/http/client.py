"""
HTTP client abstraction for separating HTTP concerns from API semantics.

HttpClient wraps a requests session for blocking use; AsyncHttpClient wraps
an httpx.AsyncClient. Neither stores per-call headers: whatever a caller
passes applies to that request only.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urljoin

import httpx
import requests

from .tls import TLSAdapter, create_tls_context

Body = Union[bytes, str, Mapping[str, Any], None]


def build_url(base_url: str, endpoint: str) -> str:
    """Join a relative endpoint onto the base URL; absolute URLs pass through."""
    if endpoint.startswith(("http://", "https://")):
        return endpoint
    return urljoin(base_url + "/", endpoint.lstrip("/"))


class HttpClient:
    """Blocking HTTP client backed by a requests session."""

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize HTTP client with configuration.

        Args:
            base_url: Base URL for all requests
            session: Optional existing session to use
            timeout: Request timeout in seconds, None for no timeout
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._owns_session = session is None
        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """Create a session whose HTTPS connections require TLS 1.2+."""
        session = requests.Session()
        session.mount("https://", TLSAdapter(ssl_context=create_tls_context()))
        return session

    def request(
        self,
        method: str,
        endpoint: str,
        data: Body = None,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        """Send one request.

        Args:
            method: HTTP method
            endpoint: API endpoint (relative to base_url) or absolute URL
            data: Form fields (mapping) or a pre-encoded body
            headers: Headers for this request only
            params: Query parameters

        Returns:
            Response object
        """
        url = build_url(self.base_url, endpoint)
        self.logger.debug(f"{method} {url}")

        response = self.session.request(
            method,
            url,
            data=data,
            headers=headers,
            params=params,
            timeout=self.timeout,
        )

        self._log_response(response)
        return response

    def get(self, endpoint: str, **kwargs) -> requests.Response:
        return self.request("GET", endpoint, **kwargs)

    def post(self, endpoint: str, **kwargs) -> requests.Response:
        return self.request("POST", endpoint, **kwargs)

    def delete(self, endpoint: str, **kwargs) -> requests.Response:
        """DELETE, optionally carrying a body."""
        return self.request("DELETE", endpoint, **kwargs)

    def _log_response(self, response: requests.Response) -> None:
        self.logger.debug(
            f"Response: {response.status_code} - {len(response.content)} bytes"
        )

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self.session and self._owns_session:
            self.session.close()


class AsyncHttpClient:
    """Non-blocking HTTP client backed by httpx.AsyncClient.

    Redirects are followed, as the requests-based HttpClient does.
    """

    def __init__(
        self,
        base_url: str,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the async HTTP client.

        Args:
            base_url: Base URL for all requests
            client: Optional existing httpx.AsyncClient to use
            timeout: Request timeout in seconds, None for no timeout
            transport: Optional transport for a newly created client
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            verify=create_tls_context(),
            follow_redirects=True,
            timeout=timeout,
            transport=transport,
        )

    async def request(
        self,
        method: str,
        endpoint: str,
        data: Body = None,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """Send one request; see HttpClient.request."""
        url = build_url(self.base_url, endpoint)
        self.logger.debug(f"{method} {url}")

        if isinstance(data, Mapping):
            response = await self.client.request(
                method, url, data=data, headers=headers, params=params
            )
        else:
            response = await self.client.request(
                method, url, content=data, headers=headers, params=params
            )

        self._log_response(response)
        return response

    async def get(self, endpoint: str, **kwargs) -> httpx.Response:
        return await self.request("GET", endpoint, **kwargs)

    async def post(self, endpoint: str, **kwargs) -> httpx.Response:
        return await self.request("POST", endpoint, **kwargs)

    async def delete(self, endpoint: str, **kwargs) -> httpx.Response:
        """DELETE, optionally carrying a body (httpx.AsyncClient.delete cannot)."""
        return await self.request("DELETE", endpoint, **kwargs)

    def _log_response(self, response: httpx.Response) -> None:
        self.logger.debug(
            f"Response: {response.status_code} - {len(response.content)} bytes"
        )

    async def aclose(self) -> None:
        """Close the underlying client if this wrapper created it."""
        if self.client and self._owns_client:
            await self.client.aclose()
