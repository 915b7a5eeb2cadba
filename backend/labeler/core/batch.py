"""Label every image in the selection, one node at a time."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

from labeler.config import Settings, settings as default_settings
from labeler.core.labeling import LabelResult, create_label_for_image
from labeler.core.scanner import scan_selection
from labeler.scene.document import Document
from labeler.scene.nodes import SceneNode

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    scanned: int = 0
    created: list[LabelResult] = field(default_factory=list)
    # Node id -> error message for nodes whose labeling raised
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def count(self) -> int:
        return len(self.created)


async def label_nodes(
    nodes: Sequence[SceneNode],
    document: Document,
    settings: Settings | None = None,
) -> BatchResult:
    """Label ``nodes`` sequentially. A failing node is recorded and skipped."""
    cfg = settings or default_settings
    batch = BatchResult(scanned=len(nodes))
    start = time.perf_counter()

    for node in nodes:
        try:
            result = await create_label_for_image(node, document, cfg)
        except Exception as e:
            batch.errors[node.id] = str(e)
            logger.warning("Labeling %s FAILED: %s", node.id, e)
            continue
        if result is not None:
            batch.created.append(result)

    logger.info(
        "Batch complete: %d/%d labeled, %d failed in %.0fms",
        batch.count,
        batch.scanned,
        len(batch.errors),
        (time.perf_counter() - start) * 1000,
    )
    return batch


async def label_selection(document: Document, settings: Settings | None = None) -> BatchResult:
    return await label_nodes(scan_selection(document.selection), document, settings)
