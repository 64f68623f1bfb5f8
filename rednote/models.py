"""
Pydantic models for scraped note metadata.
Every text field defaults to "" and every sequence to an empty tuple so a record is always complete.
"""
from __future__ import annotations

from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

ORIGINAL_QUALITY = "Original"


class EngagementCounters(BaseModel):
    """Counters exactly as rendered by the site ("1.2万", "10+"), never parsed."""

    model_config = ConfigDict(frozen=True)

    likes: str = ""
    comments: str = ""
    collects: str = ""


class DownloadOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    quality: str
    url: str


class ExtractionResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    note_id: str = Field(default="", alias="noteId")
    nickname: str = ""
    title: str = ""
    desc: str = ""
    keywords: str = ""
    duration: str = ""
    engagement: EngagementCounters = Field(default_factory=EngagementCounters)
    images: Tuple[str, ...] = ()
    downloads: Tuple[DownloadOption, ...] = ()

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict using the public field names (``noteId``)."""
        return self.model_dump(mode="json", by_alias=True)
