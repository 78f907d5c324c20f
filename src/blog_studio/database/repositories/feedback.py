"""Repository for the feedback container (partitioned by /id)."""

from __future__ import annotations

from blog_studio.database.repositories.base import BaseRepository
from blog_studio.models.feedback import Feedback


class FeedbackRepository(BaseRepository[Feedback]):
    container_name = "feedback"
    model_class = Feedback
