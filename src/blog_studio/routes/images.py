"""Images route: stock photo suggestions for a topic."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

from blog_studio.services.images import DEFAULT_TOPIC, fetch_suggested_images

router = APIRouter(tags=["images"])


@router.get("/images")
async def suggested_images(request: Request, topic: str = DEFAULT_TOPIC) -> dict[str, Any]:
    settings = request.app.state.settings
    urls = await fetch_suggested_images(
        topic, settings.pexels, client=request.app.state.http
    )
    return {"urls": urls}
