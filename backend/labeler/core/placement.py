"""Label placement geometry."""

from __future__ import annotations

from labeler.config import Placement
from labeler.scene.nodes import SceneNode

DEFAULT_GAP = 8.0


def above_left(node: SceneNode, label_height: float, gap: float = DEFAULT_GAP) -> tuple[float, float]:
    """Parent-local position: left edges aligned, label bottom ``gap`` above the image top."""
    return (node.x, node.y - (label_height + gap))


def above_absolute(node: SceneNode, label_height: float, gap: float = DEFAULT_GAP) -> tuple[float, float]:
    """Position taken from the image's absolute transform translation."""
    transform = node.absolute_transform
    return (transform[0][2], transform[1][2] - label_height - gap)


def compute_label_position(
    node: SceneNode,
    label_height: float,
    policy: Placement = Placement.ABOVE_LEFT,
    gap: float = DEFAULT_GAP,
) -> tuple[float, float]:
    if policy is Placement.ABSOLUTE:
        return above_absolute(node, label_height, gap)
    return above_left(node, label_height, gap)
