"""Document lookup and deletion, tolerant of unsaved draft identifiers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from blog_studio.exceptions import NotFoundError
from blog_studio.models.keys import PersistedKey, TemporaryKey, parse_document_key

if TYPE_CHECKING:
    from blog_studio.database.repositories.documents import DocumentRepository
    from blog_studio.models.document import Document

logger = logging.getLogger(__name__)


async def get_document(key: PersistedKey, repo: DocumentRepository) -> Document:
    """Load a stored document or raise ``NotFoundError``."""
    document = await repo.find_by_id(key.store_key)
    if document is None:
        msg = f"Document {key} not found"
        raise NotFoundError(msg)
    return document


async def delete_document(raw_id: str, repo: DocumentRepository) -> bool:
    """Hard-delete a document.

    Returns False, without touching the store, when ``raw_id`` is a draft's
    temporary key: there is nothing persisted to delete.
    """
    key = parse_document_key(raw_id)
    if isinstance(key, TemporaryKey):
        logger.info("Delete skipped for unsaved draft: id=%s", raw_id)
        return False
    if not await repo.delete_by_id(key.store_key):
        msg = f"Document {key} not found"
        raise NotFoundError(msg)
    logger.info("Document deleted: id=%s", key)
    return True
