"""Search index migration generator."""
