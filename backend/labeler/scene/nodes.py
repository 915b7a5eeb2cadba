"""Scene graph nodes — the mutable document tree the plugin operates on.

Coordinates follow the host convention:
- ``x``/``y`` are in the parent's coordinate space
- frames establish a new coordinate space for their children
- groups and pages do not: a group's children keep coordinates in the
  group's parent space, and the group's bounds track the union of its children
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, ClassVar, Iterator

import numpy as np
from numpy.typing import NDArray

from labeler.errors import FontNotLoadedError
from labeler.scene.fills import Fill, first_image_fill
from labeler.scene.fonts import DEFAULT_FONT, FontName
from labeler.scene.text_metrics import measure_text
from labeler.utils.geometry import Transform, affine, to_transform, union_bounds


@dataclass(eq=False)
class SceneNode:
    """Base node. Identity-compared: two nodes are equal only if they are the same object."""

    type: ClassVar[str] = "NODE"

    id: str
    name: str = ""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    # Degrees, counter-clockwise
    rotation: float = 0.0
    visible: bool = True
    fills: tuple[Fill, ...] = ()
    parent: ContainerNode | None = field(default=None, repr=False)
    plugin_data: dict[str, str] = field(default_factory=dict, repr=False)

    @property
    def absolute_transform(self) -> Transform:
        matrix = self._local_matrix()
        ancestor = self.parent
        while ancestor is not None:
            matrix = ancestor._space_matrix() @ matrix
            ancestor = ancestor.parent
        return to_transform(matrix)

    @property
    def has_image_fill(self) -> bool:
        return first_image_fill(self.fills) is not None

    def _local_matrix(self) -> NDArray[np.float64]:
        return affine(self.x, self.y, self.rotation)

    def _space_matrix(self) -> NDArray[np.float64]:
        """Matrix this node applies to its children's coordinates."""
        return self._local_matrix()

    def bounds(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self._notify_resized()

    def move(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self._notify_resized()

    def _notify_resized(self) -> None:
        if self.parent is not None:
            self.parent.child_changed(self)

    def set_plugin_data(self, key: str, value: str) -> None:
        if value == "":
            self.plugin_data.pop(key, None)
        else:
            self.plugin_data[key] = value

    def get_plugin_data(self, key: str) -> str:
        return self.plugin_data.get(key, "")

    def ancestors(self) -> Iterator[ContainerNode]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent


@dataclass(eq=False)
class RectangleNode(SceneNode):
    type: ClassVar[str] = "RECTANGLE"


@dataclass(eq=False)
class EllipseNode(SceneNode):
    type: ClassVar[str] = "ELLIPSE"


@dataclass(eq=False)
class VectorNode(SceneNode):
    type: ClassVar[str] = "VECTOR"


@dataclass(eq=False)
class ContainerNode(SceneNode):
    """A node that owns an ordered list of children."""

    children: list[SceneNode] = field(default_factory=list, repr=False)

    def append_child(self, child: SceneNode) -> None:
        self.insert_child(len(self.children), child)

    def insert_child(self, index: int, child: SceneNode) -> None:
        if child is self or any(a is child for a in self.ancestors()):
            raise ValueError(f"Cannot insert {child.id} into its own subtree")
        if child.parent is not None:
            old_parent = child.parent
            old_index = old_parent.index_of(child)
            old_parent.children.pop(old_index)
            if old_parent is self and old_index < index:
                index -= 1
            old_parent.child_removed(child)
        index = max(0, min(index, len(self.children)))
        self.children.insert(index, child)
        child.parent = self
        self.child_changed(child)

    def remove_child(self, child: SceneNode) -> None:
        self.children.pop(self.index_of(child))
        child.parent = None
        self.child_removed(child)

    def index_of(self, child: SceneNode) -> int:
        for i, c in enumerate(self.children):
            if c is child:
                return i
        raise ValueError(f"{child.id} is not a child of {self.id}")

    def child_changed(self, child: SceneNode) -> None:
        """Hook called after a child is inserted, moved or resized."""

    def child_removed(self, child: SceneNode) -> None:
        """Hook called after a child is detached."""

    def walk(self) -> Iterator[SceneNode]:
        """Pre-order iteration over this subtree, self included."""
        yield self
        for child in self.children:
            if isinstance(child, ContainerNode):
                yield from child.walk()
            else:
                yield child


@dataclass(eq=False)
class PageNode(ContainerNode):
    type: ClassVar[str] = "PAGE"

    def _local_matrix(self) -> NDArray[np.float64]:
        return np.eye(3)


@dataclass(eq=False)
class GroupNode(ContainerNode):
    """Group bounds always equal the union of its children's bounds."""

    type: ClassVar[str] = "GROUP"

    def _space_matrix(self) -> NDArray[np.float64]:
        return np.eye(3)

    def child_changed(self, child: SceneNode) -> None:
        self.fit_to_children()

    def child_removed(self, child: SceneNode) -> None:
        if self.children:
            self.fit_to_children()
        elif self.parent is not None:
            # empty groups are deleted by the host
            self.parent.remove_child(self)

    def fit_to_children(self) -> None:
        xmin, ymin, xmax, ymax = union_bounds([c.bounds() for c in self.children])
        self.x, self.y = xmin, ymin
        self.width, self.height = xmax - xmin, ymax - ymin
        self._notify_resized()


@dataclass(eq=False)
class FrameNode(ContainerNode):
    """Frame with optional auto-layout along one axis.

    With a layout mode set and ``AUTO`` sizing the frame hugs its children
    plus padding.
    """

    type: ClassVar[str] = "FRAME"

    layout_mode: str = "NONE"  # NONE, HORIZONTAL, VERTICAL
    primary_axis_sizing_mode: str = "FIXED"  # FIXED, AUTO
    counter_axis_sizing_mode: str = "FIXED"
    counter_axis_align_items: str = "MIN"  # MIN, CENTER, MAX
    item_spacing: float = 0.0
    padding_left: float = 0.0
    padding_right: float = 0.0
    padding_top: float = 0.0
    padding_bottom: float = 0.0
    stroke_weight: float = 0.0

    def child_changed(self, child: SceneNode) -> None:
        self.relayout()

    def child_removed(self, child: SceneNode) -> None:
        self.relayout()

    def relayout(self) -> None:
        if self.layout_mode == "NONE":
            return
        horizontal = self.layout_mode == "HORIZONTAL"
        pad_main = self.padding_left if horizontal else self.padding_top
        pad_main_end = self.padding_right if horizontal else self.padding_bottom
        pad_cross = self.padding_top if horizontal else self.padding_left
        pad_cross_end = self.padding_bottom if horizontal else self.padding_right

        visible = [c for c in self.children if c.visible]
        main_sizes = [c.width if horizontal else c.height for c in visible]
        cross_sizes = [c.height if horizontal else c.width for c in visible]

        if self.primary_axis_sizing_mode == "AUTO":
            spacing = self.item_spacing * max(len(visible) - 1, 0)
            main_total = pad_main + sum(main_sizes) + spacing + pad_main_end
        else:
            main_total = self.width if horizontal else self.height
        if self.counter_axis_sizing_mode == "AUTO":
            cross_total = pad_cross + max(cross_sizes, default=0.0) + pad_cross_end
        else:
            cross_total = self.height if horizontal else self.width
        inner_cross = cross_total - pad_cross - pad_cross_end

        cursor = pad_main
        for child, main, cross in zip(visible, main_sizes, cross_sizes):
            if self.counter_axis_align_items == "CENTER":
                offset = pad_cross + (inner_cross - cross) / 2
            elif self.counter_axis_align_items == "MAX":
                offset = pad_cross + inner_cross - cross
            else:
                offset = pad_cross
            if horizontal:
                child.x, child.y = cursor, offset
            else:
                child.x, child.y = offset, cursor
            cursor += main + self.item_spacing

        if horizontal:
            size = (main_total, cross_total)
        else:
            size = (cross_total, main_total)
        if size != (self.width, self.height):
            self.width, self.height = size
            self._notify_resized()


@dataclass(eq=False)
class TextNode(SceneNode):
    """Text layer. Characters, size and font can only change once the font is loaded."""

    type: ClassVar[str] = "TEXT"

    text_auto_resize: str = "WIDTH_AND_HEIGHT"  # NONE, HEIGHT, WIDTH_AND_HEIGHT
    font_loaded: Callable[[FontName], bool] = field(default=lambda font: True, repr=False)
    _characters: str = field(default="", repr=False)
    _font_size: float = field(default=12.0, repr=False)
    _font_name: FontName = field(default=DEFAULT_FONT, repr=False)

    @property
    def characters(self) -> str:
        return self._characters

    @characters.setter
    def characters(self, value: str) -> None:
        self._require_loaded(self._font_name)
        self._characters = value
        self.fit_text()

    @property
    def font_size(self) -> float:
        return self._font_size

    @font_size.setter
    def font_size(self, value: float) -> None:
        if value <= 0:
            raise ValueError(f"font size must be positive, got {value}")
        self._require_loaded(self._font_name)
        self._font_size = value
        self.fit_text()

    @property
    def font_name(self) -> FontName:
        return self._font_name

    @font_name.setter
    def font_name(self, value: FontName) -> None:
        self._require_loaded(value)
        self._font_name = value
        self.fit_text()

    def set_auto_resize(self, mode: str) -> None:
        self.text_auto_resize = mode
        self.fit_text()

    def fit_text(self) -> None:
        if self.text_auto_resize == "WIDTH_AND_HEIGHT":
            width, height = measure_text(self._characters, self._font_size)
        elif self.text_auto_resize == "HEIGHT":
            width, height = measure_text(self._characters, self._font_size, max_width=self.width)
        else:
            return
        if (width, height) != (self.width, self.height):
            self.resize(width, height)

    def _require_loaded(self, font: FontName) -> None:
        if not self.font_loaded(font):
            raise FontNotLoadedError(font.family, font.style)
