"""Tests for loading and dumping document snapshots."""

from __future__ import annotations

import base64

import pytest

from labeler.errors import FontNotLoadedError, SnapshotError
from labeler.models.snapshot import DocumentSnapshot
from labeler.scene.fills import ImageFill
from labeler.scene.fonts import FontName
from labeler.scene.nodes import FrameNode, TextNode
from labeler.scene.snapshot import dump_document, load_document
from tests.conftest import TITLED_PNG


def _snapshot(**overrides) -> DocumentSnapshot:
    data = {
        "page": {
            "id": "0:1",
            "type": "PAGE",
            "children": [
                {
                    "id": "2:1",
                    "type": "FRAME",
                    "name": "Card",
                    "x": 40,
                    "y": 40,
                    "width": 300,
                    "height": 300,
                    "children": [
                        {
                            "id": "2:2",
                            "type": "RECTANGLE",
                            "name": "Hero",
                            "x": 10,
                            "y": 50,
                            "width": 200,
                            "height": 120,
                            "fills": [{"type": "IMAGE", "image_hash": "abc"}],
                        },
                        {
                            "id": "2:3",
                            "type": "TEXT",
                            "name": "Caption",
                            "text": {"characters": "Hi", "font_size": 16},
                        },
                    ],
                },
            ],
        },
        "images": {"abc": base64.b64encode(TITLED_PNG).decode("ascii")},
        "fonts": [{"family": "Roboto", "style": "Regular"}],
        "selection": ["2:2"],
    }
    data.update(overrides)
    return DocumentSnapshot.model_validate(data)


def test_load_builds_tree_and_selection():
    doc = load_document(_snapshot())
    hero = doc.require_node("2:2")
    assert isinstance(hero.parent, FrameNode)
    assert isinstance(hero.fills[0], ImageFill)
    assert doc.images["abc"] == TITLED_PNG
    assert doc.selection == [hero]
    # Stored geometry is kept as-is
    assert (hero.x, hero.y) == (10.0, 50.0)


def test_loaded_text_guards_font_changes():
    doc = load_document(_snapshot())
    caption = doc.require_node("2:3")
    assert isinstance(caption, TextNode)
    assert caption.characters == "Hi"
    with pytest.raises(FontNotLoadedError):
        caption.font_name = FontName(family="Roboto")


def test_dump_preserves_structure():
    doc = load_document(_snapshot())
    dumped = dump_document(doc)
    frame = dumped.page.children[0]
    assert frame.type == "FRAME"
    assert [c.id for c in frame.children] == ["2:2", "2:3"]
    assert frame.children[1].text is not None
    assert frame.children[1].text.font_size == 16.0
    assert dumped.selection == ["2:2"]


def test_root_must_be_page():
    snap = _snapshot(page={"id": "x", "type": "FRAME"})
    with pytest.raises(SnapshotError):
        load_document(snap)


def test_duplicate_ids_rejected():
    snap = _snapshot(
        page={
            "id": "0:1",
            "type": "PAGE",
            "children": [{"id": "a", "type": "RECTANGLE"}, {"id": "a", "type": "ELLIPSE"}],
        },
        selection=[],
    )
    with pytest.raises(SnapshotError):
        load_document(snap)


def test_bad_base64_rejected():
    with pytest.raises(SnapshotError):
        load_document(_snapshot(images={"abc": "not base64!"}))


def test_unknown_selection_rejected():
    with pytest.raises(SnapshotError):
        load_document(_snapshot(selection=["9:9"]))
