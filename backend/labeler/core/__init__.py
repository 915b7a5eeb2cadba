"""Image discovery, name inference and label creation."""

from labeler.core.batch import BatchResult, label_nodes, label_selection
from labeler.core.labeling import LabelResult, create_label_for_image, load_label_font
from labeler.core.metadata import scan_metadata_text
from labeler.core.naming import derive_image_name, fallback_name, infer_display_name
from labeler.core.placement import compute_label_position
from labeler.core.scanner import count_images, find_image_nodes, scan_selection

__all__ = [
    "BatchResult",
    "label_nodes",
    "label_selection",
    "LabelResult",
    "create_label_for_image",
    "load_label_font",
    "scan_metadata_text",
    "derive_image_name",
    "fallback_name",
    "infer_display_name",
    "compute_label_position",
    "count_images",
    "find_image_nodes",
    "scan_selection",
]
