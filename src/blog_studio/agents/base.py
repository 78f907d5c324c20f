"""Shared plumbing for single-turn prompt agents."""

from __future__ import annotations

import logging
from functools import cache
from pathlib import Path
from typing import TYPE_CHECKING

from agent_framework import Agent

from blog_studio.exceptions import UpstreamError

if TYPE_CHECKING:
    from agent_framework import ChatClientProtocol

logger = logging.getLogger(__name__)

INSTRUCTIONS_DIR = Path(__file__).resolve().parents[3] / "prompts"


@cache
def _read_instructions(path: Path) -> str:
    text = path.read_text(encoding="utf-8")
    logger.debug("Agent instructions read: path=%s chars=%d", path, len(text))
    return text


class PromptAgent:
    """Wraps an Agent whose instructions live in ``prompts/<name>.md``.

    Subclasses set ``name`` and expose one coroutine per editor action, each
    a single ``_ask`` round trip.
    """

    name: str

    def __init__(self, client: ChatClientProtocol) -> None:
        self.agent = Agent(client, instructions=self.instructions(), name=self.name)

    @classmethod
    def instructions_path(cls) -> Path:
        return INSTRUCTIONS_DIR / f"{cls.name}.md"

    @classmethod
    def instructions(cls) -> str:
        """Return the agent's system prompt; a missing file is a deployment error."""
        return _read_instructions(cls.instructions_path())

    async def _ask(self, prompt: str, *, action: str) -> str:
        """Run one prompt and return the reply text; no retry on failure."""
        try:
            response = await self.agent.run(prompt)
        except Exception as exc:
            logger.exception("Generation backend failed: agent=%s action=%s", self.name, action)
            msg = f"Failed to {action}"
            raise UpstreamError(msg) from exc
        text = getattr(response, "text", None) or ""
        logger.info(
            "Generation complete: agent=%s action=%s chars=%d", self.name, action, len(text)
        )
        return text
