"""Application configuration from environment variables."""

from __future__ import annotations

import enum

from pydantic_settings import BaseSettings, SettingsConfigDict

from labeler.scene.fonts import FontName


class Placement(str, enum.Enum):
    # Parent-local: label left edge on image left edge, width fixed to image width
    ABOVE_LEFT = "above_left"
    # From the absolute transform, label wrapped in an auto-sizing frame
    ABSOLUTE = "absolute"


# Keys looked up in embedded image text chunks, highest priority first.
DEFAULT_METADATA_KEYS = [
    "Title",
    "Author",
    "Description",
    "Filename",
    "FileName",
    "File name",
    "name",
]


class Settings(BaseSettings):
    env: str = "development"
    log_level: str = "info"

    # CORS for the UI bridge
    cors_origins: list[str] = ["http://localhost:3000"]

    # Label appearance
    label_font_size: float = 14.0
    label_gap: float = 8.0
    font_fallbacks: list[FontName] = [
        FontName(family="Roboto"),
        FontName(family="Inter"),
        FontName(family="Arial"),
    ]
    placement: Placement = Placement.ABOVE_LEFT
    group_name_template: str = "{name} (with label)"

    # Name inference
    metadata_scan_limit: int = 2000
    metadata_keys: list[str] = DEFAULT_METADATA_KEYS
    strip_numeric_suffix: bool = True

    model_config = SettingsConfigDict(
        env_prefix="LABELER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
