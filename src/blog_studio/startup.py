"""Dependency construction used by the app lifespan."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from blog_studio.agents import EditorAgent, WriterAgent
from blog_studio.agents.llm import create_chat_client
from blog_studio.database.client import CosmosClient

if TYPE_CHECKING:
    from blog_studio.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AgentComponents:
    writer: WriterAgent | None = None
    editor: EditorAgent | None = None


async def init_database(settings: Settings) -> CosmosClient:
    """Connect to Cosmos DB, provisioning containers against a local emulator."""
    cosmos = CosmosClient(settings.cosmos)
    await cosmos.initialize(provision=settings.app.is_development)
    logger.info("Cosmos DB ready: database=%s", settings.cosmos.database)
    return cosmos


def init_agents(settings: Settings) -> AgentComponents:
    """Build the writer and editor agents, or none if no model is configured."""
    if not settings.openai.is_configured:
        logger.warning("No chat model configured: generation routes will return errors")
        return AgentComponents()
    chat_client = create_chat_client(settings.openai)
    return AgentComponents(writer=WriterAgent(chat_client), editor=EditorAgent(chat_client))
