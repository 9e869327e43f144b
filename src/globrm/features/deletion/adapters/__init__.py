"""Filesystem adapters for the deletion feature."""
