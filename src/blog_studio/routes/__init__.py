"""HTTP routers."""

from blog_studio.routes import documents, feedback, generation, health, images

__all__ = ["documents", "feedback", "generation", "health", "images"]
