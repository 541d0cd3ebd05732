"""Domain layer shared across animetrack packages."""
