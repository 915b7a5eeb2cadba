"""Tests for the embedded-text metadata scan."""

from __future__ import annotations

from labeler.core.metadata import read_value, scan_metadata_text
from tests.conftest import PLAIN_PNG, png_bytes


def test_title_value_is_found():
    data = b"\x89PNG....Title\x00MyPhoto\x00rest"
    assert scan_metadata_text(data) == "MyPhoto"


def test_priority_order_beats_stream_order():
    data = b"Author\x00Jane\x00....Title\x00Harbour\x00"
    assert scan_metadata_text(data) == "Harbour"


def test_empty_value_falls_through_to_next_key():
    data = b"Title\x00   \x00Description\x00Blue door\x00"
    assert scan_metadata_text(data) == "Blue door"


def test_tab_does_not_stop_but_control_bytes_do():
    assert read_value(b"k\x00a\tb\x05c", 2) == "a\tb"
    assert read_value(b"abc", 0) == "abc"


def test_whitespace_is_trimmed():
    assert scan_metadata_text(b"Filename\x00  beach.png \r\n\x00") == "beach.png"


def test_separator_controls_are_not_trimmed():
    assert scan_metadata_text(b"Title\x00Photo\x1f\x00") == "Photo\x1f"
    assert scan_metadata_text(b"Title\x00\xa0Photo\x0b\x00") == "Photo"


def test_only_prefix_is_scanned():
    late = b"\x01" * 2000 + b"Title\x00Too far\x00"
    assert scan_metadata_text(late) is None
    assert scan_metadata_text(late, limit=4000) == "Too far"


def test_value_is_cut_at_limit():
    data = b"\x01" * 10 + b"Title\x00abcdefgh"
    assert scan_metadata_text(data, limit=19) == "abc"


def test_no_keys_found():
    assert scan_metadata_text(PLAIN_PNG) is None
    assert scan_metadata_text(b"") is None


def test_png_text_chunk():
    data = png_bytes([("Software", "Editor 2"), ("Author", "Sam Lee")])
    assert scan_metadata_text(data) == "Sam Lee"


def test_custom_keys():
    data = b"Caption\x00Storefront\x00"
    assert scan_metadata_text(data, keys=["Caption"]) == "Storefront"
