"""
Standardized error message templates and error codes.

Keeps the wording of client errors consistent across the sync and async
clients.
"""

from typing import List


class ErrorMessageTemplates:
    """Standardized error message templates for consistent formatting."""

    # API call templates
    API_ERROR = "{method}: {message}"
    STATUS_ERROR = "Response status code does not indicate success: {status_code} ({reason})"
    EMPTY_REASON = "no reason phrase"

    # Configuration error templates
    CONFIG_MISSING = "Missing required configuration: '{field}'"
    CONFIG_INVALID = "Invalid configuration for '{field}': got {value!r}, expected {expected}"
    CONFIG_FILE_ERROR = "Configuration file error: {file_path} - {details}"


class RecoverySuggestions:
    """Standard recovery suggestions for common error scenarios."""

    @staticmethod
    def for_transport_error() -> List[str]:
        return [
            "Check your internet connection",
            "Verify the Plaud API base URL is reachable",
            "Check firewall and proxy settings",
        ]

    @staticmethod
    def for_status_error(status_code: int) -> List[str]:
        if status_code in (401, 403):
            return [
                "Verify your Plaud credentials or access token",
                "Authenticate again to obtain a fresh access token",
            ]
        if status_code >= 500:
            return ["The Plaud service reported an internal error; try again later"]
        return ["Check the endpoint and request payload"]

    @staticmethod
    def for_parse_error() -> List[str]:
        return [
            "Check that the response type matches the endpoint",
            "Inspect the raw response with debug logging enabled",
        ]


class ErrorCodes:
    """Standardized error codes for consistent error categorization."""

    # Configuration errors (CONFIG_xxx)
    CONFIG_MISSING = "CONFIG_001"
    CONFIG_INVALID = "CONFIG_002"
    CONFIG_FILE_ERROR = "CONFIG_003"
    CONFIG_VALIDATION_ERROR = "CONFIG_004"

    # API errors (API_xxx)
    API_ERROR = "API_001"
    API_TRANSPORT_FAILED = "API_002"
    API_STATUS_FAILED = "API_003"
    API_PARSE_FAILED = "API_004"
