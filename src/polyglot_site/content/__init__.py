"""Content sources and the page query."""
