"""Card generation, chapter navigation and practice sessions."""
