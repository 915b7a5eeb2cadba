"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SelectionRequest(BaseModel):
    node_ids: list[str] = Field(..., description="Node ids to select, in order")
