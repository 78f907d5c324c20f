"""Data models for Cosmos DB document types."""

from blog_studio.models.base import DocumentBase
from blog_studio.models.document import Document, Version
from blog_studio.models.feedback import Feedback, FeedbackRating
from blog_studio.models.keys import (
    DocumentKey,
    PersistedKey,
    TemporaryKey,
    parse_document_key,
)

__all__ = [
    "Document",
    "DocumentBase",
    "DocumentKey",
    "Feedback",
    "FeedbackRating",
    "PersistedKey",
    "TemporaryKey",
    "Version",
    "parse_document_key",
]
