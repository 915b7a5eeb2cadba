"""Plugin session: UI message dispatch and notifications."""

from labeler.plugin.controller import PluginController, summarize

__all__ = ["PluginController", "summarize"]
