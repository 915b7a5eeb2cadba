"""Serializable document snapshot — how a scene crosses the UI bridge."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from labeler.scene.fills import Fill
from labeler.scene.fonts import FontName

NodeType = Literal["PAGE", "FRAME", "GROUP", "RECTANGLE", "ELLIPSE", "VECTOR", "TEXT"]


class FrameLayout(BaseModel):
    layout_mode: Literal["NONE", "HORIZONTAL", "VERTICAL"] = "NONE"
    primary_axis_sizing_mode: Literal["FIXED", "AUTO"] = "FIXED"
    counter_axis_sizing_mode: Literal["FIXED", "AUTO"] = "FIXED"
    counter_axis_align_items: Literal["MIN", "CENTER", "MAX"] = "MIN"
    item_spacing: float = 0.0
    padding_left: float = 0.0
    padding_right: float = 0.0
    padding_top: float = 0.0
    padding_bottom: float = 0.0
    stroke_weight: float = 0.0


class TextProps(BaseModel):
    characters: str = ""
    font_name: FontName = Field(default_factory=lambda: FontName(family="Inter"))
    font_size: float = 12.0
    text_auto_resize: Literal["NONE", "HEIGHT", "WIDTH_AND_HEIGHT"] = "WIDTH_AND_HEIGHT"


class NodeSnapshot(BaseModel):
    id: str
    type: NodeType = "RECTANGLE"
    name: str = ""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    rotation: float = 0.0
    visible: bool = True
    fills: list[Fill] = Field(default_factory=list)
    plugin_data: dict[str, str] = Field(default_factory=dict)
    children: list[NodeSnapshot] = Field(default_factory=list)
    layout: FrameLayout | None = None  # FRAME only
    text: TextProps | None = None  # TEXT only


class DocumentSnapshot(BaseModel):
    """A page tree plus the host resources needed to label it."""

    page: NodeSnapshot
    images: dict[str, str] = Field(
        default_factory=dict,
        description="Image hash -> base64-encoded bytes",
    )
    fonts: list[FontName] = Field(
        default_factory=list,
        description="Fonts installed in the host (the default font is always present)",
    )
    selection: list[str] = Field(default_factory=list, description="Selected node ids, in order")
