"""Generation routes: proxy editor requests to the writer and editor agents."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request

from blog_studio.exceptions import UpstreamError
from blog_studio.schemas import ContentRequest, GenerateRequest, RefineRequest, TopicRequest
from blog_studio.services.drafts import Draft, refine_draft

router = APIRouter(tags=["generation"])

logger = logging.getLogger(__name__)


def _agent(request: Request, name: str) -> Any:
    agent = getattr(request.app.state, name, None)
    if agent is None:
        raise UpstreamError("Generation backend is not configured")
    return agent


@router.post("/generate")
async def generate(request: Request, body: GenerateRequest) -> dict[str, Any]:
    """Generate a post for a topic and return it as an unsaved HTML draft."""
    writer = _agent(request, "writer")
    text = await writer.generate(body.topic, body.style)
    draft = Draft.from_generation(text, topic=body.topic, prompt=body.topic)
    return {"content": draft.content, "draftId": str(draft.key)}


@router.post("/refine")
async def refine(request: Request, body: RefineRequest) -> dict[str, Any]:
    """Rewrite content from feedback. The result is a draft, not a version."""
    writer = _agent(request, "writer")
    text = await writer.refine(body.content, body.feedback)
    draft = refine_draft(Draft(content=body.content), text, feedback=body.feedback, mode=body.mode)
    return {"refinedContent": draft.content, "previousContent": body.content}


@router.post("/suggestions")
async def prompt_suggestions(request: Request, body: TopicRequest) -> dict[str, Any]:
    """Suggest post ideas. Suggestions are optional, so failures yield none."""
    try:
        suggestions = await _agent(request, "editor").suggest_prompts(body.topic)
    except UpstreamError:
        logger.warning("Prompt suggestions unavailable: topic=%s", body.topic)
        suggestions = []
    return {"suggestions": suggestions}


@router.post("/suggestions-improvements")
async def improvement_suggestions(request: Request, body: ContentRequest) -> dict[str, Any]:
    editor = _agent(request, "editor")
    return {"suggestions": await editor.suggest_improvements(body.content)}


@router.post("/highlights")
async def highlights(request: Request, body: ContentRequest) -> dict[str, Any]:
    """Extract keywords, phrases, and summary points from a post."""
    editor = _agent(request, "editor")
    result = await editor.extract_highlights(body.content)
    return {"highlights": result.model_dump()}
