"""Display-name inference for image nodes."""

from __future__ import annotations

import logging
import re

from labeler.config import Settings, settings as default_settings
from labeler.core.metadata import scan_metadata_text
from labeler.scene.document import Document
from labeler.scene.fills import first_image_fill
from labeler.scene.nodes import SceneNode

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Image"

# Host-generated numeric suffix, e.g. "Photo 2". ASCII digits only.
_NUMERIC_SUFFIX_RE = re.compile(r"\s*\d+\s*$", re.ASCII)


async def derive_image_name(
    node: SceneNode,
    document: Document,
    settings: Settings | None = None,
) -> str | None:
    """Name embedded in the node's image bytes, or None.

    Never raises: missing fills, missing images and fetch failures all mean
    "no metadata found".
    """
    cfg = settings or default_settings
    try:
        fill = first_image_fill(node.fills)
        if fill is None or not fill.image_hash:
            return None
        handle = document.get_image_by_hash(fill.image_hash)
        if handle is None:
            logger.debug("No image stored for hash %s on %s", fill.image_hash, node.id)
            return None
        data = await handle.get_bytes()
        return scan_metadata_text(data, keys=cfg.metadata_keys, limit=cfg.metadata_scan_limit)
    except Exception as e:
        logger.debug("Metadata lookup failed for %s: %s", node.id, e)
        return None


def fallback_name(node: SceneNode, strip_numeric_suffix: bool = True) -> str:
    """Node name, optionally without a trailing number; "Image" if nothing is left."""
    name = node.name or DEFAULT_NAME
    if strip_numeric_suffix:
        name = _NUMERIC_SUFFIX_RE.sub("", name)
    return name if name.strip() else DEFAULT_NAME


async def infer_display_name(
    node: SceneNode,
    document: Document,
    settings: Settings | None = None,
) -> str:
    """Metadata name first, node name second. Always non-empty."""
    cfg = settings or default_settings
    name = await derive_image_name(node, document, cfg)
    if name:
        return name
    return fallback_name(node, strip_numeric_suffix=cfg.strip_numeric_suffix)
