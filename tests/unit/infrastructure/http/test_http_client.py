"""
Tests for the HTTP client wrappers.
"""

from unittest.mock import Mock

import httpx
import pytest
import requests

from plaud.infrastructure.http import AsyncHttpClient, HttpClient, build_url
from plaud.infrastructure.http.tls import TLSAdapter


class TestBuildUrl:

    @pytest.mark.parametrize(
        "base, endpoint, expected",
        [
            ("https://api.plaud.ai", "/file/simple", "https://api.plaud.ai/file/simple"),
            ("https://api.plaud.ai", "file/simple", "https://api.plaud.ai/file/simple"),
            ("https://api.plaud.ai/v1", "/file/simple", "https://api.plaud.ai/v1/file/simple"),
            ("https://api.plaud.ai", "https://other.test/x", "https://other.test/x"),
        ],
    )
    def test_joins_endpoint(self, base, endpoint, expected):
        assert build_url(base, endpoint) == expected


class TestHttpClient:

    def test_init_creates_tls_session(self):
        client = HttpClient("https://api.test.plaud/")

        assert client.base_url == "https://api.test.plaud"
        assert client.timeout is None
        assert isinstance(client.session.get_adapter("https://api.test.plaud"), TLSAdapter)
        client.close()

    def test_request_passes_per_call_headers(self):
        mock_session = Mock(spec=requests.Session)
        mock_response = Mock()
        mock_response.status_code = 200
        mock_response.content = b"{}"
        mock_session.request.return_value = mock_response
        client = HttpClient("https://api.test.plaud", session=mock_session, timeout=3)

        result = client.get("/file/simple", headers={"Authorization": "Bearer t"})

        assert result is mock_response
        mock_session.request.assert_called_once_with(
            "GET",
            "https://api.test.plaud/file/simple",
            data=None,
            headers={"Authorization": "Bearer t"},
            params=None,
            timeout=3,
        )

    def test_delete_sends_body(self):
        mock_session = Mock(spec=requests.Session)
        mock_session.request.return_value = Mock(status_code=200, content=b"")
        client = HttpClient("https://api.test.plaud", session=mock_session)

        client.delete("/file", data=b'{"ids":[1]}')

        args, kwargs = mock_session.request.call_args
        assert args[0] == "DELETE"
        assert kwargs["data"] == b'{"ids":[1]}'

    def test_close_leaves_injected_session_open(self):
        mock_session = Mock(spec=requests.Session)
        HttpClient("https://api.test.plaud", session=mock_session).close()
        mock_session.close.assert_not_called()

    def test_close_closes_owned_session(self):
        client = HttpClient("https://api.test.plaud")
        client.session = Mock(spec=requests.Session)
        client.close()
        client.session.close.assert_called_once()


class TestAsyncHttpClient:

    @pytest.mark.asyncio
    async def test_owned_client_follows_redirects(self):
        client = AsyncHttpClient("https://api.test.plaud")

        assert client.client.follow_redirects is True
        await client.aclose()

    @pytest.mark.asyncio
    async def test_bytes_sent_as_content(self, recording_transport):
        recorder = recording_transport()
        client = AsyncHttpClient("https://api.test.plaud", transport=recorder.transport)

        await client.delete("/file", data=b'{"ids":[1]}', headers={"X-Test": "1"})
        await client.aclose()

        assert recorder.last.method == "DELETE"
        assert recorder.last.content == b'{"ids":[1]}'
        assert recorder.last.headers["X-Test"] == "1"

    @pytest.mark.asyncio
    async def test_mapping_sent_as_form(self, recording_transport):
        recorder = recording_transport()
        client = AsyncHttpClient("https://api.test.plaud", transport=recorder.transport)

        await client.post("/auth/access-token", data={"username": "u", "client_id": "web"})
        await client.aclose()

        assert recorder.last.headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert recorder.last.content == b"username=u&client_id=web"

    @pytest.mark.asyncio
    async def test_injected_client_not_closed(self):
        http = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        client = AsyncHttpClient("https://api.test.plaud", client=http)

        await client.aclose()

        assert not http.is_closed
        await http.aclose()
