"""Draft sessions: unsaved editor content and how it becomes a version."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Literal

from blog_studio.exceptions import NotFoundError
from blog_studio.models.document import Document
from blog_studio.models.keys import DocumentKey, PersistedKey, TemporaryKey
from blog_studio.services import versions
from blog_studio.text import markdown_to_html

if TYPE_CHECKING:
    from blog_studio.database.repositories.documents import DocumentRepository

logger = logging.getLogger(__name__)

RefineMode = Literal["replace", "append"]


@dataclass(frozen=True)
class Draft:
    """In-progress content that is not part of any version history yet."""

    content: str
    key: DocumentKey = field(default_factory=TemporaryKey.generate)
    topic: str | None = None
    title: str | None = None
    prompt: str | None = None

    @classmethod
    def from_generation(
        cls, text: str, *, topic: str | None = None, prompt: str | None = None
    ) -> Draft:
        """Start a fresh draft from markdown returned by the writer."""
        return cls(content=markdown_to_html(text), topic=topic, prompt=prompt)

    @classmethod
    def from_document(cls, document: Document) -> Draft:
        """Reset the draft to what was just persisted."""
        return cls(
            content=document.content,
            key=PersistedKey(document.id),
            topic=document.topic,
            title=document.title,
        )

    @property
    def is_saved(self) -> bool:
        return isinstance(self.key, PersistedKey)


def refine_draft(
    draft: Draft,
    refined_text: str,
    *,
    feedback: str,
    mode: RefineMode = "replace",
) -> Draft:
    """Apply refinement output to a draft, keeping it unsaved."""
    html = markdown_to_html(refined_text)
    content = html if mode == "replace" else f"{draft.content}\n{html}"
    return replace(draft, content=content, prompt=feedback)


async def save_draft(draft: Draft, repo: DocumentRepository) -> Document:
    """Persist a draft as a version.

    A draft with a temporary key becomes a new document whose only version is
    the draft. A draft of a stored document is appended to its history.
    """
    if not draft.is_saved:
        document = await repo.create(
            Document.new(
                draft.content,
                topic=draft.topic,
                title=draft.title,
                prompt=draft.prompt,
            )
        )
        logger.info(
            "Draft saved as new document: draft=%s document=%s",
            draft.key,
            document.id,
        )
        return document

    document = await repo.find_by_id(str(draft.key))
    if document is None:
        msg = f"Document {draft.key} not found"
        raise NotFoundError(msg)
    if draft.topic is not None:
        document.topic = draft.topic
    if draft.title is not None:
        document.title = draft.title
    return await versions.append_version(document, draft.content, repo, prompt=draft.prompt)
