"""Feedback business logic."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from blog_studio.models.base import utcnow
from blog_studio.models.feedback import Feedback, FeedbackRating

if TYPE_CHECKING:
    from blog_studio.database.repositories.feedback import FeedbackRepository


async def submit_feedback(
    content: str,
    rating: FeedbackRating,
    repo: FeedbackRepository,
    *,
    timestamp: datetime | None = None,
) -> Feedback:
    """Record a rating left on a piece of generated content."""
    feedback = Feedback(content=content, rating=rating, timestamp=timestamp or utcnow())
    return await repo.create(feedback)
