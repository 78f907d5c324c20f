"""Feedback document model: a reader's thumbs up/down on generated content."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import Field

from blog_studio.models.base import DocumentBase, utcnow


class FeedbackRating(StrEnum):
    UP = "up"
    DOWN = "down"


class Feedback(DocumentBase):
    """Feedback left on a piece of generated or refined content."""

    content: str
    rating: FeedbackRating
    timestamp: datetime = Field(default_factory=utcnow)
