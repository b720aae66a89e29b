"""Event parameters sent with file actions such as exports."""

from typing import Optional

from pydantic import Field

from .base import PlaudModel


class EventParam(PlaudModel):
    action: Optional[str] = None
    file_id: Optional[str] = Field(None, alias="fileID")
    file_key: Optional[str] = Field(None, alias="fileKey")
    # Associates export actions with a summary task
    summary_id: Optional[str] = Field(None, alias="summaryid")
    from_: Optional[str] = Field(None, alias="from")
