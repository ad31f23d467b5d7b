"""Page descriptors, the page registry and locale fan-out."""
