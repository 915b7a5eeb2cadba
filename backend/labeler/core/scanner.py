"""Selection scanner — collects nodes painted with an image fill."""

from __future__ import annotations

from collections.abc import Iterable

from labeler.scene.nodes import ContainerNode, SceneNode


def find_image_nodes(root: SceneNode | None) -> list[SceneNode]:
    """All nodes in ``root``'s subtree (root included) carrying an image fill.

    Depth-first pre-order, children in their stored order.
    """
    results: list[SceneNode] = []
    if root is None:
        return results

    stack: list[SceneNode] = [root]
    while stack:
        node = stack.pop()
        if node.has_image_fill:
            results.append(node)
        if isinstance(node, ContainerNode):
            # Reversed so the first child is popped first
            stack.extend(reversed(node.children))
    return results


def scan_selection(selection: Iterable[SceneNode]) -> list[SceneNode]:
    """Scan every selected node, keeping selection order then subtree order."""
    found: list[SceneNode] = []
    for node in selection:
        found.extend(find_image_nodes(node))
    return found


def count_images(selection: Iterable[SceneNode]) -> int:
    return len(scan_selection(selection))
