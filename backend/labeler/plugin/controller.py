"""Plugin controller — turns UI messages into document operations."""

from __future__ import annotations

import logging
from typing import Any, Callable

from labeler.config import Settings, settings as default_settings
from labeler.core.batch import BatchResult, label_selection
from labeler.core.scanner import count_images
from labeler.errors import PluginClosedError
from labeler.models.messages import (
    CloseMessage,
    GetSelectionInfoMessage,
    InboundMessage,
    LabelSelectionMessage,
    LabelsCreatedMessage,
    OutboundMessage,
    SelectionInfoMessage,
    ToggleVisibilityMessage,
    parse_inbound,
)
from labeler.scene.document import SELECTION_CHANGE, Document

logger = logging.getLogger(__name__)

EMPTY_SELECTION_NOTICE = "Select an image or shape with an image fill first"
NO_IMAGES_NOTICE = "No image fills found in selection"


def summarize(batch: BatchResult) -> str:
    """User-facing summary of a labeling run."""
    failed = len(batch.errors)
    if batch.count == 0:
        if failed:
            return f"Failed to label {failed} image" + ("s" if failed != 1 else "")
        return NO_IMAGES_NOTICE
    if batch.count == 1:
        message = "Added label to image"
    else:
        message = f"Added labels to {batch.count} images"
    if failed:
        message += f" ({failed} failed)"
    return message


class PluginController:
    """One plugin session bound to one document.

    Outbound messages go to ``post_message`` (by default an in-memory outbox
    the caller drains). The selection-change listener is registered once, at
    construction.
    """

    def __init__(
        self,
        document: Document,
        settings: Settings | None = None,
        post_message: Callable[[OutboundMessage], None] | None = None,
    ) -> None:
        self.document = document
        self.settings = settings or default_settings
        self.outbox: list[OutboundMessage] = []
        self._post = post_message or self.outbox.append
        self.last_batch: BatchResult | None = None
        document.on(SELECTION_CHANGE, self.send_selection_info)

    @property
    def closed(self) -> bool:
        return self.document.closed

    def drain(self) -> list[OutboundMessage]:
        messages = list(self.outbox)
        self.outbox.clear()
        return messages

    async def handle_message(self, message: InboundMessage | dict[str, Any] | str) -> None:
        if not isinstance(
            message,
            (LabelSelectionMessage, GetSelectionInfoMessage, CloseMessage, ToggleVisibilityMessage),
        ):
            message = parse_inbound(message)
        if self.closed:
            raise PluginClosedError(f"Plugin is closed; dropped {message.type!r}")

        logger.debug("UI message: %s", message.type)
        if isinstance(message, LabelSelectionMessage):
            await self.label_selection()
        elif isinstance(message, GetSelectionInfoMessage):
            self.send_selection_info()
        elif isinstance(message, CloseMessage):
            self.close()
        elif isinstance(message, ToggleVisibilityMessage):
            pass

    async def label_selection(self) -> BatchResult | None:
        if not self.document.selection:
            self.document.notify(EMPTY_SELECTION_NOTICE)
            return None

        batch = await label_selection(self.document, self.settings)
        self.last_batch = batch
        self.document.notify(summarize(batch))
        if batch.count:
            self._post(LabelsCreatedMessage(count=batch.count))
        return batch

    def send_selection_info(self) -> None:
        self._post(SelectionInfoMessage(count=count_images(self.document.selection)))

    def close(self) -> None:
        logger.info("Closing plugin")
        self.document.off(SELECTION_CHANGE, self.send_selection_info)
        self.document.close_plugin()
