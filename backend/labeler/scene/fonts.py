"""Font names and the document's font catalog."""

from __future__ import annotations

import asyncio
import logging

from pydantic import BaseModel, ConfigDict

from labeler.errors import FontUnavailableError

logger = logging.getLogger(__name__)


class FontName(BaseModel):
    model_config = ConfigDict(frozen=True)

    family: str
    style: str = "Regular"

    def __str__(self) -> str:
        return f"{self.family} {self.style}"


# Every new text node starts with this font; it is always loaded.
DEFAULT_FONT = FontName(family="Inter", style="Regular")


class FontRegistry:
    """Fonts installed in the host and fonts loaded for this session.

    Text properties can only be changed once the node's font is loaded, so
    callers ``await load(font)`` before touching characters or size.
    """

    def __init__(self, available: list[FontName] | None = None, load_delay: float = 0.0) -> None:
        self._available: set[FontName] = set(available or [DEFAULT_FONT])
        self._available.add(DEFAULT_FONT)
        self._loaded: set[FontName] = {DEFAULT_FONT}
        self._load_delay = load_delay

    @property
    def available(self) -> list[FontName]:
        return sorted(self._available, key=lambda f: (f.family, f.style))

    def is_loaded(self, font: FontName) -> bool:
        return font in self._loaded

    async def load(self, font: FontName) -> None:
        if font in self._loaded:
            return
        if self._load_delay:
            await asyncio.sleep(self._load_delay)
        if font not in self._available:
            raise FontUnavailableError(f"Font {font} is not installed")
        self._loaded.add(font)
        logger.debug("Loaded font %s", font)
