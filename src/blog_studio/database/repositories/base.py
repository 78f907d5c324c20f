"""Generic repository over a single Cosmos DB container partitioned by /id."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar, cast

from azure.cosmos.exceptions import CosmosResourceNotFoundError

from blog_studio.models.base import DocumentBase, utcnow

if TYPE_CHECKING:
    from azure.cosmos.aio import ContainerProxy, DatabaseProxy

T = TypeVar("T", bound=DocumentBase)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """CRUD and query helpers shared by every container repository."""

    container_name: ClassVar[str]
    model_class: ClassVar[type[DocumentBase]]

    def __init__(self, database: DatabaseProxy) -> None:
        self._container: ContainerProxy = database.get_container_client(self.container_name)

    def _to_model(self, data: dict[str, Any]) -> T:
        return cast("T", self.model_class.model_validate(data))

    async def create(self, item: T) -> T:
        """Insert a new item; fails if the id already exists."""
        data = await self._container.create_item(body=item.to_item())
        return self._to_model(data)

    async def get(self, item_id: str, partition_key: str) -> T | None:
        """Read a single item, or None when it does not exist."""
        try:
            data = await self._container.read_item(item=item_id, partition_key=partition_key)
        except CosmosResourceNotFoundError:
            return None
        return self._to_model(data)

    async def update(self, item: T, partition_key: str) -> T:  # noqa: ARG002
        """Overwrite the whole item, stamping ``updated_at``."""
        item.updated_at = utcnow()
        data = await self._container.upsert_item(body=item.to_item())
        return self._to_model(data)

    async def delete(self, item_id: str, partition_key: str) -> bool:
        """Hard-delete an item. Returns False when it did not exist."""
        try:
            await self._container.delete_item(item=item_id, partition_key=partition_key)
        except CosmosResourceNotFoundError:
            return False
        return True

    async def query(
        self,
        query: str,
        parameters: list[dict[str, Any]] | None = None,
    ) -> list[T]:
        """Run a SQL query and validate every row into the model class."""
        items = self._container.query_items(query=query, parameters=parameters or [])
        results = [self._to_model(data) async for data in items]
        logger.debug(
            "Query returned %d item(s) from %s", len(results), self.container_name
        )
        return results
