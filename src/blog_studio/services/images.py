"""Stock image suggestions for a blog topic (Pexels search API)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from blog_studio.config import PexelsConfig

logger = logging.getLogger(__name__)

DEFAULT_TOPIC = "technology"


async def fetch_suggested_images(
    topic: str,
    config: PexelsConfig,
    *,
    client: httpx.AsyncClient | None = None,
) -> list[str]:
    """Return medium-size image URLs for ``topic``.

    Image suggestions are decorative: any failure is logged and yields an
    empty list.
    """
    if not config.api_key:
        logger.warning("PEXELS_API_KEY is not set: image suggestions disabled")
        return []

    owns_client = client is None
    http = client or httpx.AsyncClient(timeout=10)
    try:
        response = await http.get(
            config.endpoint,
            params={"query": topic or DEFAULT_TOPIC, "per_page": config.per_page},
            headers={"Authorization": config.api_key},
        )
        response.raise_for_status()
        photos = response.json().get("photos") or []
        return [photo["src"]["medium"] for photo in photos]
    except (httpx.HTTPError, ValueError, KeyError, TypeError):
        logger.warning("Image suggestion fetch failed: topic=%s", topic, exc_info=True)
        return []
    finally:
        if owns_client:
            await http.aclose()
