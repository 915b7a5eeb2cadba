"""Approximate text measurement for the in-memory scene.

Glyph advance is taken as a fixed fraction of the font size, which is close
enough for layout decisions (label height, wrapping) without real font files.
"""

from __future__ import annotations

# Average glyph advance relative to font size.
_CHAR_WIDTH_RATIO = 0.6

# Auto line height relative to font size.
_LINE_HEIGHT_RATIO = 1.2


def line_height(font_size: float) -> float:
    return font_size * _LINE_HEIGHT_RATIO


def string_width(text: str, font_size: float) -> float:
    return len(text) * font_size * _CHAR_WIDTH_RATIO


def wrap_text_to_width(text: str, font_size: float, max_width: float) -> list[str]:
    """Greedy word wrap. Words wider than the box keep a line to themselves."""
    lines: list[str] = []
    for paragraph in text.split("\n"):
        words = paragraph.split()
        if not words:
            lines.append("")
            continue
        current = ""
        for word in words:
            candidate = word if not current else f"{current} {word}"
            if string_width(candidate, font_size) <= max_width or not current:
                current = candidate
                continue
            lines.append(current)
            current = word
        lines.append(current)
    return lines


def measure_text(
    text: str,
    font_size: float,
    max_width: float | None = None,
) -> tuple[float, float]:
    """Return (width, height) of the laid-out text.

    With ``max_width`` the text wraps and the returned width is ``max_width``;
    without it every ``\\n``-separated line is laid out on one row.
    """
    if max_width is None:
        lines = text.split("\n")
        width = max((string_width(line, font_size) for line in lines), default=0.0)
    else:
        lines = wrap_text_to_width(text, font_size, max_width)
        width = max_width
    return width, len(lines) * line_height(font_size)
