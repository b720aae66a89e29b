"""
Blocking Plaud API client.

Same operations and error contract as AsyncPlaudApi, for callers without an
event loop.
"""

from typing import Any, Optional, Type, TypeVar

import requests

from plaud.constants import AuthConstants, Endpoints
from plaud.core.config import PlaudConfig
from plaud.infrastructure.http import HttpClient
from plaud.logging import LoggingContext
from plaud.models import AuthResponse

from .base import PlaudApiBase, is_success_status

T = TypeVar("T")


class PlaudApi(PlaudApiBase):
    """Blocking client for the Plaud web API."""

    transport_errors = (requests.RequestException,)

    def __init__(
        self,
        base_url: str = Endpoints.BASE_URL,
        auth_path: str = Endpoints.AUTHENTICATION,
        client_id: str = AuthConstants.CLIENT_ID,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        super().__init__(base_url, auth_path, client_id)
        self.http = HttpClient(self.base_url, session=session, timeout=timeout)

    @classmethod
    def from_config(cls, config: PlaudConfig, **kwargs) -> "PlaudApi":
        """Create a client from a loaded PlaudConfig."""
        return cls(
            base_url=config.api.base_url,
            auth_path=config.api.auth_path,
            client_id=config.api.client_id,
            timeout=config.api.timeout,
            **kwargs,
        )

    def authenticate(self, username: str, password: str) -> AuthResponse:
        with self._call_boundary("authenticate"), LoggingContext(
            entry_msg=f"Authenticating {self._mask(username)} ...",
            success_msg="Authenticated.",
            logger=self.logger,
        ):
            response = self.http.post(
                self.auth_path,
                data=self._auth_form(username, password),
                headers=self._auth_headers(),
            )
            self._ensure_success(
                "authenticate", response.status_code, response.reason, response.text
            )
            return self._parse_auth(response.text)

    def get_data(
        self,
        endpoint: str,
        access_token: str,
        response_type: Optional[Type[T]] = None,
    ) -> T:
        with self._call_boundary("get_data"):
            response = self.http.get(endpoint, headers=self._bearer_headers(access_token))
            return self._parse("get_data", response.text, response_type)

    def post_data(
        self,
        endpoint: str,
        payload: Any,
        access_token: str,
        response_type: Optional[Type[T]] = None,
    ) -> T:
        with self._call_boundary("post_data"):
            response = self.http.post(
                endpoint,
                data=self._serialize("post_data", payload),
                headers=self._bearer_headers(access_token, has_body=True),
            )
            return self._parse("post_data", response.text, response_type)

    def post_data_no_body(self, endpoint: str, payload: Any, access_token: str) -> bool:
        with self._call_boundary("post_data_no_body"):
            response = self.http.post(
                endpoint,
                data=self._serialize("post_data_no_body", payload),
                headers=self._bearer_headers(access_token, has_body=True),
            )
            return is_success_status(response.status_code)

    def delete_with_body(self, endpoint: str, payload: Any, access_token: str) -> bool:
        with self._call_boundary("delete_with_body"):
            response = self.http.delete(
                endpoint,
                data=self._serialize("delete_with_body", payload),
                headers=self._bearer_headers(access_token, has_body=True),
            )
            return is_success_status(response.status_code)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "PlaudApi":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
