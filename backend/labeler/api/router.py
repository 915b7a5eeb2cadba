"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from labeler.api import document, health, messages

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(document.router)
api_router.include_router(messages.router)
