"""Base model shared by every Cosmos DB document type."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def utcnow() -> datetime:
    return datetime.now(UTC)


def format_timestamp(value: datetime) -> str:
    """Render a UTC timestamp with fixed microsecond precision.

    Stored timestamps are compared as strings by Cosmos DB queries, so every
    value must have the same width.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime(TIMESTAMP_FORMAT)


class DocumentBase(BaseModel):
    """Common identity and timestamp fields, stored with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime | None = None

    @field_serializer("created_at", "updated_at", when_used="json-unless-none")
    def _serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)

    def to_item(self) -> dict:
        """Serialize to the JSON body stored in Cosmos DB."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
