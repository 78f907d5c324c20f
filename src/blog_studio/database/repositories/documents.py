"""Repository for the documents container (partitioned by /id)."""

from __future__ import annotations

from blog_studio.database.repositories.base import BaseRepository
from blog_studio.models.document import Document


class DocumentRepository(BaseRepository[Document]):
    """Whole-document persistence for blog posts and their version history."""

    container_name = "documents"
    model_class = Document

    async def find_by_id(self, document_id: str) -> Document | None:
        return await self.get(document_id, document_id)

    async def save(self, document: Document) -> Document:
        """Replace the stored document with ``document`` (last write wins)."""
        return await self.update(document, document.id)

    async def delete_by_id(self, document_id: str) -> bool:
        return await self.delete(document_id, document_id)

    async def list_all(self) -> list[Document]:
        """Fetch every document, newest first."""
        return await self.query("SELECT * FROM c ORDER BY c.createdAt DESC")
