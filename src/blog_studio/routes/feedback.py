"""Feedback routes: thumbs up/down on generated content."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request

from blog_studio.database.repositories.feedback import FeedbackRepository
from blog_studio.schemas import FeedbackRequest
from blog_studio.services import feedback as feedback_svc

router = APIRouter(tags=["feedback"])

logger = logging.getLogger(__name__)


@router.post("/feedback")
async def submit_feedback(request: Request, body: FeedbackRequest) -> dict[str, Any]:
    """Record reader feedback on a piece of content."""
    cosmos = request.app.state.cosmos
    repo = FeedbackRepository(cosmos.database)
    feedback = await feedback_svc.submit_feedback(
        body.content, body.rating, repo, timestamp=body.timestamp
    )
    logger.info("Feedback submitted: id=%s rating=%s", feedback.id, feedback.rating)
    return {"success": True}
