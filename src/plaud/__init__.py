"""
Plaud: client library for the Plaud note-taking and transcription web API.

Architecture Overview:
- api: Blocking and asynchronous clients (authenticate, get/post/delete helpers)
- models: Data-transfer objects for the service's JSON shapes
- infrastructure: HTTP transports with TLS 1.2+
- core: Configuration and credential handling
- exceptions: Error hierarchy; every client failure is a PlaudApiError
- logging: Logging configuration and helpers
"""

__version__ = "0.1.0"

from .api import AsyncPlaudApi, PlaudApi
from .core.config import ConfigManager, PlaudConfig
from .exceptions import (
    PlaudApiError,
    PlaudError,
    PlaudParseError,
    PlaudStatusError,
    PlaudTransportError,
)
from .models import (
    AiContentHeader,
    AuthResponse,
    EventParam,
    ExtraData,
    OutlineResult,
    TaskIdInfo,
)

__all__ = [
    "AsyncPlaudApi",
    "PlaudApi",
    "ConfigManager",
    "PlaudConfig",
    "PlaudError",
    "PlaudApiError",
    "PlaudTransportError",
    "PlaudStatusError",
    "PlaudParseError",
    "AuthResponse",
    "AiContentHeader",
    "EventParam",
    "ExtraData",
    "OutlineResult",
    "TaskIdInfo",
]
