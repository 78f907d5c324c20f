"""Shared fixtures: settings, an in-memory document store, document factories."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from types import SimpleNamespace
from typing import TYPE_CHECKING

import pytest
from azure.cosmos.exceptions import CosmosHttpResponseError

from blog_studio.config import OpenAIConfig
from blog_studio.models.base import utcnow
from blog_studio.models.document import Document, Version

if TYPE_CHECKING:
    from collections.abc import Callable


class InMemoryDocumentRepository:
    """Stand-in for DocumentRepository that stores serialized items in a dict."""

    def __init__(self) -> None:
        self.items: dict[str, dict] = {}
        self.calls: list[str] = []
        self.fail_saves = False

    def _store_error(self) -> CosmosHttpResponseError:
        return CosmosHttpResponseError(status_code=503, message="Service unavailable")

    async def create(self, document: Document) -> Document:
        self.calls.append("create")
        if self.fail_saves:
            raise self._store_error()
        self.items[document.id] = document.to_item()
        return Document.model_validate(self.items[document.id])

    async def find_by_id(self, document_id: str) -> Document | None:
        self.calls.append("find_by_id")
        item = self.items.get(document_id)
        return Document.model_validate(item) if item else None

    async def save(self, document: Document) -> Document:
        self.calls.append("save")
        if self.fail_saves:
            raise self._store_error()
        document.updated_at = utcnow()
        self.items[document.id] = document.to_item()
        return Document.model_validate(self.items[document.id])

    async def delete_by_id(self, document_id: str) -> bool:
        self.calls.append("delete_by_id")
        return self.items.pop(document_id, None) is not None

    async def list_all(self) -> list[Document]:
        self.calls.append("list_all")
        documents = [Document.model_validate(item) for item in self.items.values()]
        return sorted(documents, key=lambda d: d.created_at, reverse=True)


@pytest.fixture
def repo() -> InMemoryDocumentRepository:
    return InMemoryDocumentRepository()


@pytest.fixture
def make_document() -> Callable[..., Document]:
    """Build a document whose versions hold the given contents, one minute apart."""

    def _make(*contents: str, current: int | None = None, **fields: object) -> Document:
        start = datetime(2026, 1, 1, tzinfo=UTC)
        versions = [
            Version(content=content, timestamp=start + timedelta(minutes=i))
            for i, content in enumerate(contents)
        ]
        index = len(versions) - 1 if current is None else current
        return Document(
            content=contents[index],
            versions=versions,
            current_version=index,
            created_at=start,
            **fields,
        )

    return _make


@pytest.fixture
def openai_config(monkeypatch: pytest.MonkeyPatch) -> OpenAIConfig:
    monkeypatch.setenv("AZURE_OPENAI_ENDPOINT", "https://oai.example.com")
    monkeypatch.setenv("AZURE_OPENAI_DEPLOYMENT", "gpt-4o")
    monkeypatch.delenv("AZURE_OPENAI_API_KEY", raising=False)
    return OpenAIConfig()


@pytest.fixture
def settings() -> SimpleNamespace:
    """Minimal settings for app factory and route tests."""
    return SimpleNamespace(
        app=SimpleNamespace(env="test", is_development=False, log_level="INFO"),
        monitor=SimpleNamespace(connection_string=""),
        rate_limit=SimpleNamespace(max_requests=1000, window_seconds=60, trust_forwarded=False),
        pexels=SimpleNamespace(
            api_key="pexels-key",
            per_page=6,
            endpoint="https://api.pexels.com/v1/search",
        ),
        cosmos=SimpleNamespace(endpoint="https://cosmos.example.com", database="blog-studio"),
        openai=SimpleNamespace(is_configured=True),
    )
