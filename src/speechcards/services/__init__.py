"""File-level services."""
