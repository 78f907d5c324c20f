"""Document identifiers: store-assigned keys versus client-side draft keys."""

from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class TemporaryKey:
    """Identifier the editor gives a draft that has never been saved."""

    local_key: str

    @classmethod
    def generate(cls) -> TemporaryKey:
        return cls(f"temp-{uuid.uuid4().hex[:12]}")

    def __str__(self) -> str:
        return self.local_key


@dataclass(frozen=True)
class PersistedKey:
    """Identifier assigned by the document store."""

    store_key: str

    def __str__(self) -> str:
        return self.store_key


DocumentKey = TemporaryKey | PersistedKey


def parse_document_key(raw: str) -> DocumentKey:
    """Classify a raw identifier.

    Store keys are canonical UUID strings; anything else came from a client
    that has not saved its draft yet.
    """
    try:
        parsed = uuid.UUID(raw)
    except (ValueError, AttributeError, TypeError):
        return TemporaryKey(raw)
    if str(parsed) != raw.lower():
        return TemporaryKey(raw)
    return PersistedKey(str(parsed))
