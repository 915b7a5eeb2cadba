"""Domain exceptions."""

from __future__ import annotations


class LabelerError(Exception):
    """Base class for all labeler errors."""


class FontNotLoadedError(LabelerError):
    """A text property was set before its font finished loading."""

    def __init__(self, family: str, style: str) -> None:
        super().__init__(f"Font {family} {style} is not loaded")
        self.family = family
        self.style = style


class FontUnavailableError(LabelerError):
    """The requested font does not exist in the document's font catalog."""


class NodeNotFoundError(LabelerError):
    """A node id did not resolve to a node in the document."""


class PluginClosedError(LabelerError):
    """A message arrived after the plugin was closed."""


class SnapshotError(LabelerError):
    """A document snapshot could not be loaded."""
