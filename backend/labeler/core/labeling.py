"""Create a name label above an image node and group the two together."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from labeler.config import Placement, Settings, settings as default_settings
from labeler.core.naming import infer_display_name
from labeler.core.placement import compute_label_position
from labeler.errors import LabelerError
from labeler.scene.document import Document
from labeler.scene.fills import BLACK
from labeler.scene.fonts import FontName
from labeler.scene.nodes import FrameNode, GroupNode, SceneNode, TextNode

logger = logging.getLogger(__name__)

LABEL_NODE_NAME = "Image Name Label"
CONTAINER_NODE_NAME = "Image Name"
LABEL_ID_KEY = "labelId"


@dataclass
class LabelResult:
    group: GroupNode
    label: TextNode
    name: str
    # Auto-layout frame around the label (absolute placement only)
    container: FrameNode | None = None


async def load_label_font(document: Document, fallbacks: Sequence[FontName]) -> FontName | None:
    """Load the first font that succeeds. None if every choice fails."""
    for font in fallbacks:
        try:
            await document.load_font(font)
        except Exception as e:
            logger.debug("Font %s not loaded: %s", font, e)
            continue
        return font
    logger.warning(
        "None of the label fonts could be loaded (%s); keeping the default font",
        ", ".join(str(f) for f in fallbacks),
    )
    return None


async def create_label_for_image(
    node: SceneNode,
    document: Document,
    settings: Settings | None = None,
) -> LabelResult | None:
    """Label ``node`` with its inferred name. None if it has no image fill.

    The label and the image end up in a new group that takes the image's
    place in its original parent. Labeling the same image twice produces two
    independent groups.
    """
    cfg = settings or default_settings
    if not node.has_image_fill:
        return None
    parent = node.parent
    if parent is None:
        raise LabelerError(f"Node {node.id} is not attached to the document")

    name = await infer_display_name(node, document, cfg)

    text = document.create_text()
    text.name = LABEL_NODE_NAME
    text.fills = (BLACK,)

    # Text properties can only be set once a font is ready
    font = await load_label_font(document, cfg.font_fallbacks)
    if font is not None:
        text.font_name = font
    text.font_size = cfg.label_font_size

    container: FrameNode | None = None
    if cfg.placement is Placement.ABSOLUTE:
        text.set_auto_resize("WIDTH_AND_HEIGHT")
        text.characters = name
        container = _wrap_in_container(document, text)
        label_node: SceneNode = container
    else:
        # Width pinned to the image; wrapped lines grow the height
        text.resize(node.width, text.height)
        text.set_auto_resize("HEIGHT")
        text.characters = name
        label_node = text

    parent.append_child(label_node)
    x, y = compute_label_position(node, label_node.height, cfg.placement, cfg.label_gap)
    label_node.move(x, y)

    group = document.group([node, label_node], parent, parent.index_of(node))
    group.name = cfg.group_name_template.format(name=name)
    group.set_plugin_data(LABEL_ID_KEY, text.id)

    logger.info("Labeled %s as %r (group %s)", node.id, name, group.id)
    return LabelResult(group=group, label=text, name=name, container=container)


def _wrap_in_container(document: Document, text: TextNode) -> FrameNode:
    """Transparent horizontal auto-layout frame hugging the label."""
    frame = document.create_frame()
    frame.name = CONTAINER_NODE_NAME
    frame.fills = ()
    frame.stroke_weight = 0.0
    frame.layout_mode = "HORIZONTAL"
    frame.counter_axis_align_items = "CENTER"
    frame.primary_axis_sizing_mode = "AUTO"
    frame.counter_axis_sizing_mode = "AUTO"
    frame.item_spacing = 4.0
    frame.padding_left = 4.0
    frame.padding_right = 4.0
    frame.padding_top = 2.0
    frame.padding_bottom = 2.0
    text.x = 0.0
    text.y = 0.0
    frame.append_child(text)
    return frame
