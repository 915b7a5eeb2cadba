"""Convert between a live Document and its serializable snapshot."""

from __future__ import annotations

import base64
import binascii
import logging

from labeler.errors import SnapshotError
from labeler.models.snapshot import DocumentSnapshot, FrameLayout, NodeSnapshot, TextProps
from labeler.scene.document import Document
from labeler.scene.fonts import FontRegistry
from labeler.scene.nodes import (
    ContainerNode,
    EllipseNode,
    FrameNode,
    GroupNode,
    PageNode,
    RectangleNode,
    SceneNode,
    TextNode,
    VectorNode,
)

logger = logging.getLogger(__name__)

_LEAF_TYPES: dict[str, type[SceneNode]] = {
    "RECTANGLE": RectangleNode,
    "ELLIPSE": EllipseNode,
    "VECTOR": VectorNode,
}


def load_document(snapshot: DocumentSnapshot) -> Document:
    """Build a Document from a snapshot. Raises SnapshotError on bad input."""
    if snapshot.page.type != "PAGE":
        raise SnapshotError(f"Root node must be a PAGE, got {snapshot.page.type}")

    images: dict[str, bytes] = {}
    for image_hash, encoded in snapshot.images.items():
        try:
            images[image_hash] = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as e:
            raise SnapshotError(f"Image {image_hash} is not valid base64: {e}") from e

    seen: set[str] = set()
    page = _build_node(snapshot.page, seen)
    if not isinstance(page, PageNode):
        raise SnapshotError(f"Root node {snapshot.page.id!r} did not load as a page")
    doc = Document(page=page, fonts=FontRegistry(snapshot.fonts), images=images)
    for node in page.walk():
        if isinstance(node, TextNode):
            node.font_loaded = doc.fonts.is_loaded

    selection: list[SceneNode] = []
    for node_id in snapshot.selection:
        node = doc.get_node_by_id(node_id)
        if node is None:
            raise SnapshotError(f"Selected node {node_id!r} is not in the page")
        selection.append(node)
    doc.set_selection(selection)

    logger.info(
        "Loaded document: %d nodes, %d images, %d selected",
        len(seen),
        len(images),
        len(selection),
    )
    return doc


def _build_node(snap: NodeSnapshot, seen: set[str]) -> SceneNode:
    if snap.id in seen:
        raise SnapshotError(f"Duplicate node id {snap.id!r}")
    seen.add(snap.id)

    common = dict(
        id=snap.id,
        name=snap.name,
        x=snap.x,
        y=snap.y,
        width=snap.width,
        height=snap.height,
        rotation=snap.rotation,
        visible=snap.visible,
        fills=tuple(snap.fills),
        plugin_data=dict(snap.plugin_data),
    )

    if snap.type in _LEAF_TYPES or snap.type == "TEXT":
        if snap.children:
            raise SnapshotError(f"{snap.type} node {snap.id!r} cannot have children")
        if snap.type == "TEXT":
            text = snap.text or TextProps()
            # Stored text is taken as-is; font checks only guard later edits
            return TextNode(
                **common,
                text_auto_resize=text.text_auto_resize,
                _characters=text.characters,
                _font_size=text.font_size,
                _font_name=text.font_name,
            )
        return _LEAF_TYPES[snap.type](**common)

    node: ContainerNode
    if snap.type == "PAGE":
        node = PageNode(**common)
    elif snap.type == "GROUP":
        node = GroupNode(**common)
    else:
        layout = snap.layout or FrameLayout()
        node = FrameNode(**common, **layout.model_dump())

    # Attach directly so hooks do not re-layout stored geometry
    for child_snap in snap.children:
        child = _build_node(child_snap, seen)
        child.parent = node
        node.children.append(child)
    return node


def dump_document(doc: Document) -> DocumentSnapshot:
    return DocumentSnapshot(
        page=_dump_node(doc.current_page),
        images={h: base64.b64encode(data).decode("ascii") for h, data in doc.images.items()},
        fonts=doc.fonts.available,
        selection=[n.id for n in doc.selection],
    )


def _dump_node(node: SceneNode) -> NodeSnapshot:
    snap = NodeSnapshot(
        id=node.id,
        type=node.type,
        name=node.name,
        x=node.x,
        y=node.y,
        width=node.width,
        height=node.height,
        rotation=node.rotation,
        visible=node.visible,
        fills=list(node.fills),
        plugin_data=dict(node.plugin_data),
    )
    if isinstance(node, ContainerNode):
        snap.children = [_dump_node(c) for c in node.children]
    if isinstance(node, FrameNode):
        snap.layout = FrameLayout(
            layout_mode=node.layout_mode,
            primary_axis_sizing_mode=node.primary_axis_sizing_mode,
            counter_axis_sizing_mode=node.counter_axis_sizing_mode,
            counter_axis_align_items=node.counter_axis_align_items,
            item_spacing=node.item_spacing,
            padding_left=node.padding_left,
            padding_right=node.padding_right,
            padding_top=node.padding_top,
            padding_bottom=node.padding_bottom,
            stroke_weight=node.stroke_weight,
        )
    if isinstance(node, TextNode):
        snap.text = TextProps(
            characters=node.characters,
            font_name=node.font_name,
            font_size=node.font_size,
            text_auto_resize=node.text_auto_resize,
        )
    return snap
