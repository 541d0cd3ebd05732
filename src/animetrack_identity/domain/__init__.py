"""Domain layer for identity and watch lists."""
