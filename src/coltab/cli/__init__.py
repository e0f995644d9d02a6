"""Command-line surface for coltab."""
