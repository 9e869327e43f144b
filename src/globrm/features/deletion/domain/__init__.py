"""Domain types for the deletion feature."""
