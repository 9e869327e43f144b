"""Use cases for the deletion feature."""
