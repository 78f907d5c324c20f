"""Async Cosmos DB client lifecycle and container provisioning."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from azure.cosmos import PartitionKey
from azure.cosmos.aio import CosmosClient as AzureCosmosClient
from azure.cosmos.aio import DatabaseProxy
from azure.cosmos.exceptions import CosmosHttpResponseError

if TYPE_CHECKING:
    from blog_studio.config import CosmosConfig

logger = logging.getLogger(__name__)

CONTAINERS = ("documents", "feedback")


class CosmosClient:
    """Owns the async Cosmos DB client and the Blog Studio database handle."""

    def __init__(self, config: CosmosConfig) -> None:
        self._config = config
        self._client: AzureCosmosClient | None = None
        self._database: DatabaseProxy | None = None

    async def initialize(self, *, provision: bool = False) -> None:
        """Connect, and optionally create the database and containers.

        Provisioning is meant for local emulators; deployed accounts are
        created by infrastructure.
        """
        self._client = AzureCosmosClient(self._config.endpoint, credential=self._config.key)
        if not provision:
            self._database = self._client.get_database_client(self._config.database)
            return

        try:
            self._database = await self._client.create_database_if_not_exists(
                self._config.database
            )
            for name in CONTAINERS:
                await self._database.create_container_if_not_exists(
                    id=name, partition_key=PartitionKey(path="/id")
                )
        except CosmosHttpResponseError as exc:
            await self.close()
            msg = f"Cosmos DB provisioning failed at {self._config.endpoint}: {exc.message}"
            raise ConnectionError(msg) from exc
        logger.info(
            "Cosmos DB provisioned: database=%s containers=%s",
            self._config.database,
            ",".join(CONTAINERS),
        )

    async def close(self) -> None:
        if self._client:
            await self._client.close()
            self._client = None
            self._database = None

    @property
    def database(self) -> DatabaseProxy:
        if self._database is None:
            raise RuntimeError("CosmosClient not initialized: call initialize() first")
        return self._database
