"""Application layer for identity and watch lists."""
