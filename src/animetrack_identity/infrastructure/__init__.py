"""Infrastructure adapters for identity and watch lists."""
