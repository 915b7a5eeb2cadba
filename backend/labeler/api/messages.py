"""POST /api/messages — deliver one UI message to the plugin session."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from labeler.dependencies import Session, get_session
from labeler.errors import PluginClosedError
from labeler.models.messages import InboundEnvelope
from labeler.models.responses import MessageResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/messages", response_model=MessageResponse)
async def post_message(envelope: InboundEnvelope, session: Session = Depends(get_session)) -> MessageResponse:
    try:
        await session.controller.handle_message(envelope.root)
    except PluginClosedError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e

    return MessageResponse(
        messages=session.controller.drain(),
        notifications=session.drain_notifications(),
        closed=session.controller.closed,
    )
