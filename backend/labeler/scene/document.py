"""Document — the host context every plugin operation receives explicitly.

Bundles the current page, the selection, the image store, the font catalog,
the notification surface and selection-change events. Nothing in the plugin
reaches for a global document.
"""

from __future__ import annotations

import asyncio
import hashlib
import logging
from collections import defaultdict
from typing import Callable

from labeler.errors import LabelerError, NodeNotFoundError
from labeler.scene.fills import Color, SolidFill
from labeler.scene.fonts import FontName, FontRegistry
from labeler.scene.nodes import ContainerNode, FrameNode, GroupNode, PageNode, SceneNode, TextNode

logger = logging.getLogger(__name__)

SELECTION_CHANGE = "selectionchange"

_WHITE = SolidFill(color=Color(r=1.0, g=1.0, b=1.0))


class ImageHandle:
    """Lazy accessor for the raw bytes behind an image hash."""

    def __init__(self, image_hash: str, data: bytes, delay: float = 0.0) -> None:
        self.hash = image_hash
        self._data = data
        self._delay = delay

    async def get_bytes(self) -> bytes:
        if self._delay:
            await asyncio.sleep(self._delay)
        return self._data


class Document:
    """In-memory host document."""

    def __init__(
        self,
        page: PageNode | None = None,
        fonts: FontRegistry | None = None,
        images: dict[str, bytes] | None = None,
        image_delay: float = 0.0,
    ) -> None:
        self.current_page = page or PageNode(id="0:1", name="Page 1")
        self.fonts = fonts or FontRegistry()
        self.images: dict[str, bytes] = dict(images or {})
        # Seconds every byte fetch waits before returning
        self.image_delay = image_delay
        self.notifications: list[str] = []
        self.closed = False
        self._selection: list[SceneNode] = []
        self._listeners: dict[str, list[Callable[[], None]]] = defaultdict(list)
        self._id_counter = 0

    # --- Node lookup ---

    def get_node_by_id(self, node_id: str) -> SceneNode | None:
        for node in self.current_page.walk():
            if node.id == node_id:
                return node
        return None

    def require_node(self, node_id: str) -> SceneNode:
        node = self.get_node_by_id(node_id)
        if node is None:
            raise NodeNotFoundError(f"No node with id {node_id!r}")
        return node

    def _new_id(self) -> str:
        existing = {n.id for n in self.current_page.walk()}
        while True:
            self._id_counter += 1
            candidate = f"1:{self._id_counter}"
            if candidate not in existing:
                return candidate

    # --- Selection ---

    @property
    def selection(self) -> list[SceneNode]:
        # Nodes detached from the page drop out of the selection
        return [n for n in self._selection if self._on_page(n)]

    def set_selection(self, nodes: list[SceneNode]) -> None:
        self._selection = list(nodes)
        logger.debug("Selection changed: %d node(s)", len(self._selection))
        self.emit(SELECTION_CHANGE)

    def _on_page(self, node: SceneNode) -> bool:
        return node is self.current_page or any(a is self.current_page for a in node.ancestors())

    # --- Events ---

    def on(self, event: str, callback: Callable[[], None]) -> None:
        self._listeners[event].append(callback)

    def off(self, event: str, callback: Callable[[], None]) -> None:
        if callback in self._listeners[event]:
            self._listeners[event].remove(callback)

    def emit(self, event: str) -> None:
        for callback in list(self._listeners[event]):
            callback()

    # --- Images ---

    def add_image(self, data: bytes) -> str:
        """Store image bytes and return their content hash."""
        image_hash = hashlib.sha1(data).hexdigest()
        self.images[image_hash] = data
        return image_hash

    def get_image_by_hash(self, image_hash: str) -> ImageHandle | None:
        data = self.images.get(image_hash)
        if data is None:
            return None
        return ImageHandle(image_hash, data, self.image_delay)

    # --- Fonts ---

    async def load_font(self, font: FontName) -> None:
        await self.fonts.load(font)

    # --- Node factories ---

    def create_text(self) -> TextNode:
        """New empty text node on the current page, using the default font."""
        node = TextNode(id=self._new_id(), name="Text", font_loaded=self.fonts.is_loaded)
        self.current_page.append_child(node)
        return node

    def create_frame(self) -> FrameNode:
        """New 100×100 white frame on the current page."""
        node = FrameNode(id=self._new_id(), name="Frame", width=100.0, height=100.0, fills=(_WHITE,))
        self.current_page.append_child(node)
        return node

    def group(
        self,
        nodes: list[SceneNode],
        parent: ContainerNode,
        index: int | None = None,
    ) -> GroupNode:
        """Move ``nodes`` into a new group inserted into ``parent`` at ``index``.

        Without an index the group goes on top of the parent's children.
        """
        if not nodes:
            raise LabelerError("Cannot group an empty list of nodes")
        group = GroupNode(id=self._new_id(), name="Group")
        if index is None:
            index = len(parent.children)
        parent.insert_child(index, group)
        for node in nodes:
            group.append_child(node)
        return group

    # --- UI surface ---

    def notify(self, message: str) -> None:
        logger.info("Notify: %s", message)
        self.notifications.append(message)

    def close_plugin(self) -> None:
        self.closed = True
        self._listeners.clear()
