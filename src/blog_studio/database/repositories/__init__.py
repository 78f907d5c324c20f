"""Repository modules for each Cosmos DB container."""

from blog_studio.database.repositories.documents import DocumentRepository
from blog_studio.database.repositories.feedback import FeedbackRepository

__all__ = [
    "DocumentRepository",
    "FeedbackRepository",
]
