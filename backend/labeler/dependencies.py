"""FastAPI dependency injection."""

from __future__ import annotations

import logging

from labeler.config import Settings, settings
from labeler.plugin.controller import PluginController
from labeler.scene.document import Document

logger = logging.getLogger(__name__)


class Session:
    """The document currently open in the bridge and its plugin controller."""

    def __init__(self, document: Document, cfg: Settings | None = None) -> None:
        self.document = document
        self.controller = PluginController(document, cfg or settings)
        self._notified = len(document.notifications)

    def drain_notifications(self) -> list[str]:
        fresh = self.document.notifications[self._notified:]
        self._notified = len(self.document.notifications)
        return fresh


_session: Session | None = None


def get_session() -> Session:
    global _session
    if _session is None:
        _session = Session(Document())
    return _session


def open_session(document: Document) -> Session:
    """Replace the current session with one bound to ``document``."""
    global _session
    if _session is not None and not _session.controller.closed:
        _session.controller.close()
    _session = Session(document)
    logger.info("Opened session on page %s", document.current_page.id)
    return _session
