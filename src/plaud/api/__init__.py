"""Plaud API clients."""

from .async_client import AsyncPlaudApi
from .base import PlaudApiBase, is_success_status
from .client import PlaudApi

__all__ = ["AsyncPlaudApi", "PlaudApi", "PlaudApiBase", "is_success_status"]
