"""Text helpers for model output."""

from __future__ import annotations

import re

import markdown

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


def markdown_to_html(text: str) -> str:
    """Render markdown produced by the writer into HTML for the editor."""
    return markdown.markdown(text.strip(), extensions=["extra", "sane_lists"])


def strip_code_fences(raw: str) -> str:
    """Remove ```json fences that chat models wrap around JSON replies."""
    return _FENCE_RE.sub("", raw).strip()
