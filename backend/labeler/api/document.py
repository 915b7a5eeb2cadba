"""GET/PUT /api/document, POST /api/selection — document state for the UI."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from labeler.dependencies import Session, get_session, open_session
from labeler.errors import NodeNotFoundError, PluginClosedError, SnapshotError
from labeler.models.requests import SelectionRequest
from labeler.models.responses import DocumentResponse, MessageResponse
from labeler.models.snapshot import DocumentSnapshot
from labeler.scene.snapshot import dump_document, load_document

router = APIRouter()
logger = logging.getLogger(__name__)


def _document_response(session: Session) -> DocumentResponse:
    doc = session.document
    return DocumentResponse(
        document=dump_document(doc),
        node_count=sum(1 for _ in doc.current_page.walk()),
        image_count=len(doc.images),
    )


@router.put("/document", response_model=DocumentResponse)
async def put_document(snapshot: DocumentSnapshot) -> DocumentResponse:
    try:
        doc = load_document(snapshot)
    except SnapshotError as e:
        logger.warning("Rejected document snapshot: %s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e
    return _document_response(open_session(doc))


@router.get("/document", response_model=DocumentResponse)
async def get_document(session: Session = Depends(get_session)) -> DocumentResponse:
    return _document_response(session)


@router.post("/selection", response_model=MessageResponse)
async def set_selection(req: SelectionRequest, session: Session = Depends(get_session)) -> MessageResponse:
    if session.controller.closed:
        raise HTTPException(status_code=409, detail=str(PluginClosedError("Plugin is closed")))
    try:
        nodes = [session.document.require_node(node_id) for node_id in req.node_ids]
    except NodeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    session.document.set_selection(nodes)
    return MessageResponse(
        messages=session.controller.drain(),
        notifications=session.drain_notifications(),
    )
