"""Writer agent: drafts blog posts and rewrites them from reader feedback."""

from __future__ import annotations

from blog_studio.agents.base import PromptAgent

STYLES = ("professional", "casual", "technical")

_GENERATE_TEMPLATE = """\
Write a comprehensive blog post about "{topic}".

Tone: {style}.

Structure:
- An engaging introduction of two paragraphs.
- Three main sections with `##` headings, each with two or three `###` subsections.
- A conclusion with key takeaways.

Include real-world examples and actionable advice. Mark statistics with **bold**.
Respond with the post in markdown and nothing else.
"""

_REFINE_TEMPLATE = """\
Here is a blog post:

{content}

User feedback: {feedback}

Provide a refined version of the blog post based on the feedback.
Respond with the full refined post in markdown and nothing else.
"""


class WriterAgent(PromptAgent):
    name = "writer"

    async def generate(self, topic: str, style: str = "professional") -> str:
        """Draft a new post on ``topic``. Returns markdown."""
        prompt = _GENERATE_TEMPLATE.format(topic=topic, style=style)
        return await self._ask(prompt, action="generate content")

    async def refine(self, content: str, feedback: str) -> str:
        """Rewrite ``content`` according to ``feedback``. Returns markdown."""
        prompt = _REFINE_TEMPLATE.format(content=content, feedback=feedback)
        return await self._ask(prompt, action="refine content")
