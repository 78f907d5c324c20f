"""Version history rules: append, switch, and delete versions of a document.

Every operation works on a deep copy of the document it is given. When
persistence fails the caller's object is untouched and the store keeps the
previous revision, so no half-applied state is ever visible.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from blog_studio.exceptions import ProtectedVersionError, VersionOutOfRangeError
from blog_studio.models.base import utcnow
from blog_studio.models.document import Version

if TYPE_CHECKING:
    from blog_studio.database.repositories.documents import DocumentRepository
    from blog_studio.models.document import Document

logger = logging.getLogger(__name__)

ORIGINAL_VERSION = 0


def _check_index(document: Document, index: int) -> None:
    if not 0 <= index < len(document.versions):
        raise VersionOutOfRangeError(index, len(document.versions))


def with_appended_version(
    document: Document, content: str, *, prompt: str | None = None
) -> Document:
    """Return a copy with ``content`` appended as the new current version."""
    updated = document.model_copy(deep=True)
    updated.versions.append(Version(content=content, prompt=prompt, timestamp=utcnow()))
    updated.current_version = len(updated.versions) - 1
    updated.content = content
    return updated


def switch_version(document: Document, index: int) -> Document:
    """Return a copy pointing at version ``index``; the history is unchanged."""
    _check_index(document, index)
    updated = document.model_copy(deep=True)
    updated.current_version = index
    updated.content = updated.versions[index].content
    return updated


def without_version(document: Document, index: int) -> Document:
    """Return a copy with version ``index`` removed.

    The pointer keeps following the version the user was looking at. If
    that version is the one removed, it moves to the version that took its
    slot, or to the new last version.
    """
    if index == ORIGINAL_VERSION:
        raise ProtectedVersionError
    _check_index(document, index)

    updated = document.model_copy(deep=True)
    del updated.versions[index]
    if index < updated.current_version:
        updated.current_version -= 1
    updated.current_version = min(updated.current_version, len(updated.versions) - 1)
    updated.content = updated.active_version.content
    return updated


async def append_version(
    document: Document,
    content: str,
    repo: DocumentRepository,
    *,
    prompt: str | None = None,
) -> Document:
    """Append a version, make it current, and persist the document."""
    saved = await repo.save(with_appended_version(document, content, prompt=prompt))
    logger.info(
        "Version appended: document=%s index=%d", saved.id, saved.current_version
    )
    return saved


async def activate_version(
    document: Document, index: int, repo: DocumentRepository
) -> Document:
    """Switch to version ``index`` and persist the new pointer."""
    saved = await repo.save(switch_version(document, index))
    logger.info("Version activated: document=%s index=%d", saved.id, index)
    return saved


async def delete_version(
    document: Document, index: int, repo: DocumentRepository
) -> Document:
    """Remove version ``index`` (never the original) and persist the document."""
    saved = await repo.save(without_version(document, index))
    logger.info(
        "Version deleted: document=%s index=%d remaining=%d current=%d",
        saved.id,
        index,
        len(saved.versions),
        saved.current_version,
    )
    return saved
