"""Request bodies accepted by the JSON API."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from blog_studio.models.feedback import FeedbackRating


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateDocumentRequest(ApiModel):
    content: str = Field(min_length=1)
    topic: str | None = None
    title: str | None = None
    prompt: str | None = None


class DeleteDocumentRequest(ApiModel):
    id: str = Field(min_length=1)


class AppendVersionRequest(ApiModel):
    content: str = Field(min_length=1)
    prompt: str | None = None
    topic: str | None = None
    title: str | None = None


class SwitchVersionRequest(ApiModel):
    index: int


class GenerateRequest(ApiModel):
    topic: str = Field(min_length=3, max_length=100)
    style: Literal["professional", "casual", "technical"] = "professional"


class RefineRequest(ApiModel):
    content: str = Field(min_length=1)
    feedback: str = Field(min_length=1)
    mode: Literal["replace", "append"] = "replace"


class TopicRequest(ApiModel):
    topic: str = Field(min_length=1, max_length=100)


class ContentRequest(ApiModel):
    content: str = Field(min_length=1)


class FeedbackRequest(ApiModel):
    content: str
    rating: FeedbackRating
    timestamp: datetime | None = None
