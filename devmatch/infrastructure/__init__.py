"""Infrastructure adapters (persistence, logging)."""
