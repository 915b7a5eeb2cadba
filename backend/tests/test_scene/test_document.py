"""Tests for the in-memory host document."""

from __future__ import annotations

import asyncio

import pytest

from labeler.errors import FontUnavailableError, LabelerError, NodeNotFoundError
from labeler.scene.document import SELECTION_CHANGE, Document
from labeler.scene.fonts import FontName
from tests.conftest import PLAIN_PNG, ROBOTO, image_rect, plain_rect


def test_group_takes_requested_index(document: Document):
    page = document.current_page
    first = plain_rect("a")
    photo = image_rect(document, "b", "Photo")
    last = plain_rect("c")
    for node in (first, photo, last):
        page.append_child(node)
    extra = plain_rect("d", x=0, y=-40)
    page.append_child(extra)

    group = document.group([photo, extra], page, page.index_of(photo))

    assert [n.id for n in page.children] == ["a", group.id, "c"]
    assert group.children == [photo, extra]
    assert photo.parent is group


def test_group_without_nodes_fails(document: Document):
    with pytest.raises(LabelerError):
        document.group([], document.current_page)


def test_new_ids_do_not_collide(document: Document):
    document.current_page.append_child(plain_rect("1:1"))
    text = document.create_text()
    frame = document.create_frame()
    assert text.id != "1:1"
    assert len({text.id, frame.id, "1:1"}) == 3


def test_require_node(document: Document):
    with pytest.raises(NodeNotFoundError):
        document.require_node("nope")


def test_selection_change_event(document: Document):
    calls: list[int] = []
    rect = plain_rect("a")
    document.current_page.append_child(rect)
    document.on(SELECTION_CHANGE, lambda: calls.append(len(document.selection)))
    document.set_selection([rect])
    document.set_selection([])
    assert calls == [1, 0]


def test_detached_nodes_leave_selection(document: Document):
    rect = plain_rect("a")
    document.current_page.append_child(rect)
    document.set_selection([rect])
    document.current_page.remove_child(rect)
    assert document.selection == []


def test_image_store_roundtrip(document: Document):
    image_hash = document.add_image(PLAIN_PNG)
    handle = document.get_image_by_hash(image_hash)
    assert handle is not None
    assert asyncio.run(handle.get_bytes()) == PLAIN_PNG
    assert document.get_image_by_hash("0" * 40) is None


def test_slow_image_fetch_yields_to_other_tasks():
    doc = Document(image_delay=0.01)
    handle = doc.get_image_by_hash(doc.add_image(PLAIN_PNG))
    order: list[str] = []

    async def fetch():
        data = await handle.get_bytes()
        order.append("fetched")
        return data

    async def other():
        order.append("other")

    async def main():
        return await asyncio.gather(fetch(), other())

    data, _ = asyncio.run(main())
    assert data == PLAIN_PNG
    assert order == ["other", "fetched"]


def test_font_loading(document: Document):
    asyncio.run(document.load_font(ROBOTO))
    assert document.fonts.is_loaded(ROBOTO)
    with pytest.raises(FontUnavailableError):
        asyncio.run(document.load_font(FontName(family="Comic Sans MS")))


def test_close_drops_listeners():
    doc = Document()
    calls: list[str] = []
    doc.on(SELECTION_CHANGE, lambda: calls.append("x"))
    doc.close_plugin()
    doc.set_selection([])
    assert doc.closed
    assert calls == []
