"""Generation backend agents."""

from blog_studio.agents.editor import EditorAgent, Highlights
from blog_studio.agents.writer import WriterAgent

__all__ = [
    "EditorAgent",
    "Highlights",
    "WriterAgent",
]
