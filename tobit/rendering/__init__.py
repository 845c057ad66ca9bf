"""Plain-text rendering."""
