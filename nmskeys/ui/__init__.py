"""Terminal UI for browsing key bindings."""
