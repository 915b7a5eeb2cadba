"""In-memory scene graph: nodes, fills, fonts and the host document."""

from labeler.scene.document import Document, ImageHandle
from labeler.scene.fills import Fill, GradientFill, ImageFill, SolidFill
from labeler.scene.fonts import FontName, FontRegistry
from labeler.scene.nodes import (
    ContainerNode,
    EllipseNode,
    FrameNode,
    GroupNode,
    PageNode,
    RectangleNode,
    SceneNode,
    TextNode,
)

__all__ = [
    "Document",
    "ImageHandle",
    "Fill",
    "GradientFill",
    "ImageFill",
    "SolidFill",
    "FontName",
    "FontRegistry",
    "ContainerNode",
    "EllipseNode",
    "FrameNode",
    "GroupNode",
    "PageNode",
    "RectangleNode",
    "SceneNode",
    "TextNode",
]
