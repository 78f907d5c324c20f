"""Cosmos DB access layer."""

from blog_studio.database.client import CosmosClient

__all__ = ["CosmosClient"]
