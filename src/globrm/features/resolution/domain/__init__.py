"""Domain types for pattern resolution."""
