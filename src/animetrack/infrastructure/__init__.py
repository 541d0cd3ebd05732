"""Infrastructure adapters for the shared animetrack domain."""
