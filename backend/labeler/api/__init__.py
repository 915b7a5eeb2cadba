"""HTTP bridge between the plugin UI and the plugin session."""
