"""
Application-wide constants for the Plaud API client.

This module centralizes endpoint paths, wire values and defaults so the
client, configuration and tests share one source for them.
"""

# Network and connection constants
DEFAULT_TIMEOUT_SECONDS = None  # no client-side timeout unless configured
HTTP_SUCCESS_MIN = 200
HTTP_SUCCESS_MAX = 299

# File size constants (bytes)
BYTES_PER_MB = 1024 * 1024

# Logging constants
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * BYTES_PER_MB
MIN_LOG_FILE_SIZE_BYTES = BYTES_PER_MB
DEFAULT_LOG_BACKUP_COUNT = 5

# Credential masking
MASKED_CREDENTIAL_VISIBLE_CHARS = 4


class Endpoints:
    """Plaud web API addresses."""

    BASE_URL = "https://api.plaud.ai"
    AUTHENTICATION = "/auth/access-token"


class AuthConstants:
    """Values sent with the credential form post."""

    CLIENT_ID = "web"
    FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class ContentTypes:
    """Content types used on the wire."""

    JSON = "application/json"
    JSON_UTF8 = "application/json; charset=utf-8"
