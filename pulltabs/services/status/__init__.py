"""Status page service."""
