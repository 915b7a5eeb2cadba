"""Tests for label placement geometry."""

from __future__ import annotations

import pytest

from labeler.config import Placement
from labeler.core.placement import compute_label_position
from labeler.scene.nodes import FrameNode, PageNode, RectangleNode


def _nested_image() -> RectangleNode:
    page = PageNode(id="p")
    frame = FrameNode(id="f", x=300, y=50, width=400, height=400)
    node = RectangleNode(id="n", x=20, y=100, width=120, height=80)
    page.append_child(frame)
    frame.append_child(node)
    return node


def test_above_left_uses_parent_coordinates():
    node = _nested_image()
    assert compute_label_position(node, 20.0) == (20.0, 72.0)


def test_absolute_uses_transform_translation():
    node = _nested_image()
    x, y = compute_label_position(node, 20.0, Placement.ABSOLUTE)
    assert x == pytest.approx(320.0)
    assert y == pytest.approx(122.0)


def test_gap_is_configurable():
    node = _nested_image()
    assert compute_label_position(node, 10.0, gap=2.0) == (20.0, 88.0)
