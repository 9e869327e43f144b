"""Use cases for pattern resolution."""
