"""Heuristic scan for embedded ``key\\0value`` text in raw image bytes.

Image formats store free-text metadata as keyword/value pairs separated by a
NUL byte (PNG tEXt chunks being the common case). This is not a parser: it
looks at a bounded prefix of the byte stream and reads the first value that
follows a known keyword.
"""

from __future__ import annotations

from collections.abc import Sequence

from labeler.config import DEFAULT_METADATA_KEYS

DEFAULT_SCAN_LIMIT = 2000

# NUL and the control bytes below TAB end a value; TAB, LF and CR do not.
STOP_BYTES = frozenset(range(0, 9))

# Whitespace trimmed from values. Other control bytes such as 0x1C-0x1F are kept.
TRIM_CHARS = " \t\n\x0b\x0c\r\xa0"


def read_value(data: bytes, start: int) -> str:
    """Read bytes from ``start`` until a stop byte or the end of ``data``."""
    end = start
    while end < len(data) and data[end] not in STOP_BYTES:
        end += 1
    # latin-1 maps every byte to exactly one character
    return data[start:end].decode("latin-1")


def scan_metadata_text(
    data: bytes,
    keys: Sequence[str] = DEFAULT_METADATA_KEYS,
    limit: int = DEFAULT_SCAN_LIMIT,
) -> str | None:
    """Return the first non-empty value for ``keys`` in priority order.

    Only the first ``limit`` bytes are examined; a value that runs past the
    limit is cut there. Keys are tried in the order given, not in the order
    they appear in the data, and only each key's first occurrence is read.
    """
    window = bytes(data[:limit])
    for key in keys:
        marker = key.encode("latin-1") + b"\x00"
        idx = window.find(marker)
        if idx == -1:
            continue
        value = read_value(window, idx + len(marker)).strip(TRIM_CHARS)
        if value:
            return value
    return None
