"""
AI content and transcription metadata shapes.

These describe the ``extra_data`` attached to a recording once the service
has produced a transcript, an outline and an AI summary for it.
"""

from typing import List, Optional

from pydantic import Field

from .base import OpenPlaudModel, PlaudModel


class RecommendQuestion(OpenPlaudModel):
    """A follow-up question suggested for a summary."""

    question: Optional[str] = None


class AiContentHeader(PlaudModel):
    """Headline, keywords and classification of an AI summary."""

    headline: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)
    # Optional in newer API responses
    summary_id: Optional[str] = None
    language_code: Optional[str] = None
    industry_category: Optional[str] = None
    recommend_questions: List[RecommendQuestion] = Field(default_factory=list)


class TaskIdInfo(PlaudModel):
    """Identifiers of the background tasks that produced a recording's content."""

    summary_id: Optional[str] = None
    trans_task_id: Optional[str] = None
    outline_task_id: Optional[str] = None


class TranConfig(OpenPlaudModel):
    """Transcription settings used for a recording."""


class AiContentFrom(OpenPlaudModel):
    """Describes what an AI summary was generated from."""


class ExtraData(PlaudModel):
    model: Optional[str] = None
    tran_config: Optional[TranConfig] = Field(None, alias="tranConfig")
    ai_content_from: Optional[AiContentFrom] = Field(None, alias="aiContentFrom")
    ai_content_header: Optional[AiContentHeader] = Field(None, alias="aiContentHeader")
    task_id_info: Optional[TaskIdInfo] = None


class OutlineResult(PlaudModel):
    """One topic of a recording outline; times are in milliseconds."""

    start_time: int = 0
    end_time: int = 0
    topic: Optional[str] = None

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time
