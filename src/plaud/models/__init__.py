"""Data-transfer objects for the Plaud API."""

from .auth import AuthResponse
from .base import OpenPlaudModel, PlaudModel
from .content import (
    AiContentFrom,
    AiContentHeader,
    ExtraData,
    OutlineResult,
    RecommendQuestion,
    TaskIdInfo,
    TranConfig,
)
from .events import EventParam

__all__ = [
    "PlaudModel",
    "OpenPlaudModel",
    "AuthResponse",
    "AiContentHeader",
    "RecommendQuestion",
    "AiContentFrom",
    "TranConfig",
    "TaskIdInfo",
    "ExtraData",
    "OutlineResult",
    "EventParam",
]
