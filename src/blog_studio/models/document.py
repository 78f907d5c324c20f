"""Blog document model with its index-addressed version history."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    FieldSerializationInfo,
    field_serializer,
    model_validator,
)
from pydantic.alias_generators import to_camel

from blog_studio.models.base import DocumentBase, utcnow


class Version(BaseModel):
    """A content snapshot in a document's history.

    Whether a version is active is not stored here; it is derived from the
    owning document's ``current_version`` when serialized.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content: str
    prompt: str | None = None
    timestamp: datetime = Field(default_factory=utcnow)


class Document(DocumentBase):
    """A blog post and the ordered versions it has gone through.

    Index 0 of ``versions`` is the original and is never removed.
    ``content`` mirrors the content of ``versions[current_version]``.
    """

    content: str
    topic: str | None = None
    title: str | None = None
    images: list[str] = Field(default_factory=list)
    versions: list[Version] = Field(min_length=1)
    current_version: int = 0

    @model_validator(mode="before")
    @classmethod
    def _seed_legacy_history(cls, data: Any) -> Any:
        """Give records stored before version history existed an original version."""
        if isinstance(data, dict) and "versions" not in data:
            timestamp = data.get("createdAt") or data.get("created_at") or utcnow()
            data = {
                **data,
                "versions": [{"content": data.get("content", ""), "timestamp": timestamp}],
                "currentVersion": 0,
            }
            data.pop("current_version", None)
        return data

    @model_validator(mode="after")
    def _check_current_version(self) -> Document:
        if not 0 <= self.current_version < len(self.versions):
            msg = (
                f"current_version {self.current_version} outside "
                f"0..{len(self.versions) - 1}"
            )
            raise ValueError(msg)
        return self

    @field_serializer("versions")
    def _serialize_versions(
        self, versions: list[Version], info: FieldSerializationInfo
    ) -> list[dict[str, Any]]:
        active_key = "isActive" if info.by_alias else "is_active"
        serialized = []
        for index, version in enumerate(versions):
            data = version.model_dump(
                mode=info.mode,
                by_alias=bool(info.by_alias),
                exclude_none=info.exclude_none,
            )
            data[active_key] = index == self.current_version
            serialized.append(data)
        return serialized

    @property
    def active_version(self) -> Version:
        return self.versions[self.current_version]

    @classmethod
    def new(
        cls,
        content: str,
        *,
        topic: str | None = None,
        title: str | None = None,
        prompt: str | None = None,
    ) -> Document:
        """Create a document holding exactly one (original) version."""
        now = utcnow()
        return cls(
            content=content,
            topic=topic,
            title=title,
            versions=[Version(content=content, prompt=prompt, timestamp=now)],
            current_version=0,
            created_at=now,
        )

    def to_response(self) -> dict[str, Any]:
        """Serialize for API clients, which address documents by ``_id``."""
        data = self.to_item()
        data["_id"] = data.pop("id")
        return data
