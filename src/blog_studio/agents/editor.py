"""Editor agent: prompt ideas, improvement suggestions, and highlights."""

from __future__ import annotations

import json
import logging

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from blog_studio.agents.base import PromptAgent
from blog_studio.exceptions import UpstreamError
from blog_studio.text import strip_code_fences

logger = logging.getLogger(__name__)

_STRING_LIST = TypeAdapter(list[str])

_PROMPT_SUGGESTIONS_TEMPLATE = """\
Suggest five specific blog post ideas for the topic "{topic}".
Return a JSON array of strings, one idea per string.
"""

_IMPROVEMENTS_TEMPLATE = """\
Provide improvement suggestions for the following blog post.
List your suggestions as a JSON array of strings.

Blog post:
{content}
"""

_HIGHLIGHTS_TEMPLATE = """\
Extract the following from the blog post as a JSON object with keys
"keywords", "phrases", and "summary". Each key should have an array of strings.

Blog post:
{content}
"""


class Highlights(BaseModel):
    keywords: list[str] = Field(default_factory=list)
    phrases: list[str] = Field(default_factory=list)
    summary: list[str] = Field(default_factory=list)


class EditorAgent(PromptAgent):
    name = "editor"

    async def suggest_prompts(self, topic: str) -> list[str]:
        """Suggest post ideas the user could generate next."""
        raw = await self._ask(
            _PROMPT_SUGGESTIONS_TEMPLATE.format(topic=topic), action="suggest prompts"
        )
        return _parse_string_list(raw, action="suggest prompts")

    async def suggest_improvements(self, content: str) -> list[str]:
        raw = await self._ask(
            _IMPROVEMENTS_TEMPLATE.format(content=content), action="suggest improvements"
        )
        return _parse_string_list(raw, action="suggest improvements")

    async def extract_highlights(self, content: str) -> Highlights:
        """Pull keywords, notable phrases, and a summary out of a post."""
        raw = await self._ask(
            _HIGHLIGHTS_TEMPLATE.format(content=content), action="extract highlights"
        )
        try:
            return Highlights.model_validate_json(strip_code_fences(raw) or "{}")
        except ValidationError as exc:
            logger.warning("Unparseable highlights reply: %.200s", raw)
            raise UpstreamError("Failed to extract highlights") from exc


def _parse_string_list(raw: str, *, action: str) -> list[str]:
    """Parse a JSON array of strings from a model reply."""
    try:
        return _STRING_LIST.validate_python(json.loads(strip_code_fences(raw) or "[]"))
    except (json.JSONDecodeError, ValidationError) as exc:
        logger.warning("Unparseable %s reply: %.200s", action, raw)
        msg = f"Failed to {action}"
        raise UpstreamError(msg) from exc
