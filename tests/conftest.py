"""
Pytest configuration and shared fixtures for Plaud client tests.
"""

import json
import os
from typing import Any, Callable, List, Optional

import httpx
import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from plaud.api import AsyncPlaudApi, PlaudApi

BASE_URL = "https://api.test.plaud"

PLAUD_ENV_VARS = [
    "PLAUD_BASE_URL", "PLAUD_AUTH_PATH", "PLAUD_CLIENT_ID", "PLAUD_TIMEOUT",
    "PLAUD_USERNAME", "PLAUD_PASSWORD", "PLAUD_LOG_LEVEL", "PLAUD_LOG_FORMAT",
    "PLAUD_LOG_OUTPUT", "PLAUD_LOG_FILE_PATH",
]


def json_body(data: Any) -> bytes:
    return json.dumps(data).encode("utf-8")


class RecordingTransport:
    """httpx transport that records requests and answers from a handler.

    The handler receives the httpx.Request and returns an httpx.Response, or
    raises to simulate a transport failure.
    """

    def __init__(self, handler: Optional[Callable[[httpx.Request], httpx.Response]] = None):
        self.requests: List[httpx.Request] = []
        self.handler = handler or (lambda request: httpx.Response(200, json={}))
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


class RecordingAdapter(BaseAdapter):
    """requests adapter that records prepared requests and answers from a handler.

    The handler receives the PreparedRequest and returns a
    ``(status_code, body_bytes)`` tuple, or raises.
    """

    def __init__(self, handler: Optional[Callable] = None):
        super().__init__()
        self.requests: List[requests.PreparedRequest] = []
        self.handler = handler or (lambda request: (200, b"{}"))

    def send(self, request, **kwargs):
        self.requests.append(request)
        status_code, body = self.handler(request)
        response = requests.Response()
        response.status_code = status_code
        response._content = body
        response.headers = CaseInsensitiveDict({"Content-Type": "application/json"})
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        response.reason = "OK" if 200 <= status_code < 300 else "Error"
        return response

    def close(self):
        pass

    @property
    def last(self) -> requests.PreparedRequest:
        return self.requests[-1]


@pytest.fixture
def recording_transport():
    """Factory for RecordingTransport instances."""
    return RecordingTransport


@pytest.fixture
def make_async_api():
    """Build an AsyncPlaudApi wired to a RecordingTransport."""
    def _make(handler=None, **kwargs):
        recorder = RecordingTransport(handler)
        api = AsyncPlaudApi(base_url=BASE_URL, transport=recorder.transport, **kwargs)
        return api, recorder
    return _make


@pytest.fixture
def make_sync_api():
    """Build a PlaudApi whose session is served by a RecordingAdapter."""
    def _make(handler=None, **kwargs):
        adapter = RecordingAdapter(handler)
        session = requests.Session()
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        api = PlaudApi(base_url=BASE_URL, session=session, **kwargs)
        return api, adapter
    return _make


@pytest.fixture
def temp_dir(tmp_path):
    return tmp_path


@pytest.fixture
def config_file(temp_dir):
    """A config file path inside a temporary config directory."""
    config_dir = temp_dir / ".config" / "plaud"
    config_dir.mkdir(parents=True)
    return config_dir / "config.toml"


@pytest.fixture
def clean_environment(monkeypatch, tmp_path):
    """Remove PLAUD_* variables and run from a directory without a .env file."""
    for var in PLAUD_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def sample_extra_data():
    """An extra_data block as returned for a summarized recording."""
    return {
        "model": "gpt-4o",
        "tranConfig": {"language": "en", "type_type": "meeting"},
        "aiContentFrom": {"type": "summary", "source": "trans"},
        "aiContentHeader": {
            "headline": "Quarterly planning",
            "keywords": ["budget", "roadmap"],
            "summary_id": "sum-1",
            "language_code": "en",
            "industry_category": "business",
            "recommend_questions": [
                {"question": "What is the budget?"},
                {"question": "Who owns the roadmap?", "id": 2},
            ],
        },
        "task_id_info": {
            "summary_id": "sum-1",
            "trans_task_id": "trans-9",
            "outline_task_id": "outline-3",
        },
    }


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Mark everything under tests/unit as a unit test."""
    for item in items:
        if f"{os.sep}unit{os.sep}" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
