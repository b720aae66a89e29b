"""
TLS configuration shared by the blocking and asynchronous transports.

The service requires TLS 1.2 or newer; every connection the client opens
uses a context with that floor.
"""

import ssl
from typing import Optional

import certifi
from requests.adapters import HTTPAdapter

MINIMUM_TLS_VERSION = ssl.TLSVersion.TLSv1_2


def create_tls_context(cafile: Optional[str] = None) -> ssl.SSLContext:
    """Create a verifying client context that refuses anything below TLS 1.2."""
    context = ssl.create_default_context(cafile=cafile or certifi.where())
    context.minimum_version = MINIMUM_TLS_VERSION
    return context


class TLSAdapter(HTTPAdapter):
    """HTTPAdapter that pins the SSL context used by its connection pools."""

    def __init__(self, ssl_context: Optional[ssl.SSLContext] = None, **kwargs):
        # Must be set before HTTPAdapter.__init__ builds the pool manager
        self.ssl_context = ssl_context or create_tls_context()
        super().__init__(**kwargs)

    def init_poolmanager(self, *args, **kwargs):
        kwargs["ssl_context"] = self.ssl_context
        return super().init_poolmanager(*args, **kwargs)

    def proxy_manager_for(self, *args, **kwargs):
        kwargs["ssl_context"] = self.ssl_context
        return super().proxy_manager_for(*args, **kwargs)
