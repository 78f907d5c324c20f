"""Documents routes: list, create, delete, and manage version history."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request

from blog_studio.database.repositories.documents import DocumentRepository
from blog_studio.exceptions import NotFoundError
from blog_studio.models.keys import PersistedKey, TemporaryKey, parse_document_key
from blog_studio.schemas import (
    AppendVersionRequest,
    CreateDocumentRequest,
    DeleteDocumentRequest,
    SwitchVersionRequest,
)
from blog_studio.services import documents as documents_svc
from blog_studio.services import versions as versions_svc
from blog_studio.services.drafts import Draft, save_draft

if TYPE_CHECKING:
    from blog_studio.models.document import Document

router = APIRouter(prefix="/documents", tags=["documents"])

logger = logging.getLogger(__name__)

_UNSAVED_NOOP = {"success": True, "message": "Document is not saved; nothing to delete"}


def _repo(request: Request) -> DocumentRepository:
    return DocumentRepository(request.app.state.cosmos.database)


def _saved_response(document: Document) -> dict[str, Any]:
    """Serialize a saved document with the key the editor should now draft under."""
    draft = Draft.from_document(document)
    return {**document.to_response(), "draftId": str(draft.key)}


def _persisted_key(raw_id: str) -> PersistedKey:
    key = parse_document_key(raw_id)
    if isinstance(key, TemporaryKey):
        msg = f"Document {raw_id} not found"
        raise NotFoundError(msg)
    return key


@router.get("")
async def list_documents(request: Request) -> list[dict[str, Any]]:
    """Return every document, newest first."""
    documents = await _repo(request).list_all()
    return [document.to_response() for document in documents]


@router.post("")
async def create_document(request: Request, body: CreateDocumentRequest) -> dict[str, Any]:
    """Save new content as a document with a single original version."""
    draft = Draft(content=body.content, topic=body.topic, title=body.title, prompt=body.prompt)
    document = await save_draft(draft, _repo(request))
    return _saved_response(document)


@router.delete("")
async def delete_document(request: Request, body: DeleteDocumentRequest) -> dict[str, Any]:
    """Hard-delete a document. Unsaved draft ids are accepted as a no-op."""
    if not await documents_svc.delete_document(body.id, _repo(request)):
        return _UNSAVED_NOOP
    return {"success": True}


@router.get("/{document_id}")
async def get_document(request: Request, document_id: str) -> dict[str, Any]:
    document = await documents_svc.get_document(_persisted_key(document_id), _repo(request))
    return document.to_response()


@router.post("/{document_id}/versions")
async def append_version(
    request: Request, document_id: str, body: AppendVersionRequest
) -> dict[str, Any]:
    """Save editor content as the newest version.

    Saving against an unsaved draft id creates the document instead.
    """
    draft = Draft(
        content=body.content,
        key=parse_document_key(document_id),
        topic=body.topic,
        title=body.title,
        prompt=body.prompt,
    )
    document = await save_draft(draft, _repo(request))
    return _saved_response(document)


@router.put("/{document_id}/current-version")
async def switch_version(
    request: Request, document_id: str, body: SwitchVersionRequest
) -> dict[str, Any]:
    """Point the document at another version and persist the choice."""
    repo = _repo(request)
    document = await documents_svc.get_document(_persisted_key(document_id), repo)
    document = await versions_svc.activate_version(document, body.index, repo)
    return document.to_response()


@router.delete("/{document_id}/versions/{index}")
async def delete_version(request: Request, document_id: str, index: int) -> dict[str, Any]:
    """Delete one version. The original (index 0) is protected."""
    key = parse_document_key(document_id)
    if isinstance(key, TemporaryKey):
        logger.info("Version delete skipped for unsaved draft: id=%s", document_id)
        return _UNSAVED_NOOP
    repo = _repo(request)
    document = await documents_svc.get_document(key, repo)
    document = await versions_svc.delete_version(document, index, repo)
    return document.to_response()
