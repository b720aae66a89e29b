"""HTTP infrastructure components."""

from .client import AsyncHttpClient, HttpClient, build_url
from .tls import MINIMUM_TLS_VERSION, TLSAdapter, create_tls_context

__all__ = [
    "HttpClient",
    "AsyncHttpClient",
    "build_url",
    "TLSAdapter",
    "create_tls_context",
    "MINIMUM_TLS_VERSION",
]
