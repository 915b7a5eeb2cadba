"""Shared test fixtures."""

from __future__ import annotations

import struct
import zlib

import pytest

from labeler.config import Settings
from labeler.scene.document import Document
from labeler.scene.fills import ImageFill, SolidFill
from labeler.scene.fonts import FontName, FontRegistry
from labeler.scene.nodes import FrameNode, PageNode, RectangleNode

ROBOTO = FontName(family="Roboto")
INTER = FontName(family="Inter")
ARIAL = FontName(family="Arial")

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _chunk(kind: bytes, payload: bytes) -> bytes:
    crc = zlib.crc32(kind + payload) & 0xFFFFFFFF
    return struct.pack(">I", len(payload)) + kind + payload + struct.pack(">I", crc)


def png_bytes(text_chunks: list[tuple[str, str]] | None = None, padding: int = 0) -> bytes:
    """Minimal 1x1 PNG with optional tEXt chunks placed after ``padding`` bytes of ancillary data."""
    ihdr = _chunk(b"IHDR", struct.pack(">IIBBBBB", 1, 1, 8, 2, 0, 0, 0))
    parts = [_PNG_SIGNATURE, ihdr]
    if padding:
        parts.append(_chunk(b"zzZz", b"\x01" * padding))
    for key, value in text_chunks or []:
        # NUL-terminated so the scan stops before the chunk CRC
        payload = key.encode("latin-1") + b"\x00" + value.encode("latin-1") + b"\x00"
        parts.append(_chunk(b"tEXt", payload))
    parts.append(_chunk(b"IDAT", zlib.compress(b"\x00\xff\x00\x00")))
    parts.append(_chunk(b"IEND", b""))
    return b"".join(parts)


TITLED_PNG = png_bytes([("Title", "Sunset over Bay")])
PLAIN_PNG = png_bytes()


def image_rect(
    doc: Document,
    node_id: str,
    name: str,
    data: bytes | None = PLAIN_PNG,
    x: float = 0.0,
    y: float = 0.0,
    width: float = 200.0,
    height: float = 100.0,
) -> RectangleNode:
    """Rectangle with an image fill whose bytes are stored in ``doc``."""
    image_hash = doc.add_image(data) if data is not None else "missing"
    return RectangleNode(
        id=node_id,
        name=name,
        x=x,
        y=y,
        width=width,
        height=height,
        fills=(ImageFill(image_hash=image_hash),),
    )


def plain_rect(node_id: str, name: str = "Rectangle", x: float = 0.0, y: float = 0.0) -> RectangleNode:
    return RectangleNode(id=node_id, name=name, x=x, y=y, width=50.0, height=50.0, fills=(SolidFill(),))


def make_document(fonts: list[FontName] | None = None) -> Document:
    return Document(
        page=PageNode(id="0:1", name="Page 1"),
        fonts=FontRegistry([ROBOTO, INTER, ARIAL] if fonts is None else fonts),
    )


@pytest.fixture
def document() -> Document:
    return make_document()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def mixed_selection(document: Document):
    """Three selected nodes: a photo, a frame holding a nested photo, and a plain shape."""
    photo = image_rect(document, "10:1", "Photo 1", TITLED_PNG, x=20, y=100)
    frame = FrameNode(id="10:2", name="Card", x=300, y=50, width=300, height=300)
    nested = image_rect(document, "10:3", "Avatar 2", PLAIN_PNG, x=10, y=60, width=120, height=120)
    shape = plain_rect("10:4", x=700, y=100)

    page = document.current_page
    page.append_child(photo)
    page.append_child(frame)
    frame.append_child(nested)
    page.append_child(shape)
    document.set_selection([photo, frame, shape])
    return photo, frame, nested, shape
