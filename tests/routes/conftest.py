"""Fixtures for route tests: the real app with store and agents mocked."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from blog_studio.app import create_app
from blog_studio.agents.editor import Highlights


@pytest.fixture
def writer() -> MagicMock:
    agent = MagicMock()
    agent.generate = AsyncMock(return_value="## Intro\n\nHello")
    agent.refine = AsyncMock(return_value="Refined")
    return agent


@pytest.fixture
def editor() -> MagicMock:
    agent = MagicMock()
    agent.suggest_prompts = AsyncMock(return_value=["Idea"])
    agent.suggest_improvements = AsyncMock(return_value=["Add examples"])
    agent.extract_highlights = AsyncMock(return_value=Highlights(keywords=["espresso"]))
    return agent


@pytest.fixture
def feedback_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.create.side_effect = lambda feedback: feedback
    return repo


@pytest.fixture
def client(settings, repo, writer, editor, feedback_repo):
    cosmos = MagicMock()
    cosmos.database = MagicMock()
    cosmos.close = AsyncMock()
    agents = SimpleNamespace(writer=writer, editor=editor)

    with (
        patch("blog_studio.app.load_settings", return_value=settings),
        patch("blog_studio.app.configure_logging"),
        patch("blog_studio.app.init_database", new=AsyncMock(return_value=cosmos)),
        patch("blog_studio.app.init_agents", return_value=agents),
        patch("blog_studio.routes.documents.DocumentRepository", return_value=repo),
        patch("blog_studio.routes.feedback.FeedbackRepository", return_value=feedback_repo),
    ):
        app = create_app()
        with TestClient(app) as test_client:
            yield test_client


@pytest.fixture
def seed(repo, make_document):
    """Store a document with the given version contents and return it."""

    def _seed(*contents: str, current: int | None = None):
        document = make_document(*contents, current=current)
        repo.items[document.id] = document.to_item()
        return document

    return _seed
