"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from labeler.models.messages import OutboundMessage
from labeler.models.snapshot import DocumentSnapshot


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class MessageResponse(BaseModel):
    """Everything the plugin produced while handling one request."""

    messages: list[OutboundMessage] = Field(default_factory=list)
    notifications: list[str] = Field(default_factory=list)
    closed: bool = False


class DocumentResponse(BaseModel):
    document: DocumentSnapshot
    node_count: int = 0
    image_count: int = 0
