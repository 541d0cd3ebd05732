"""Catalog lookup adapters."""

from animetrack.infrastructure.catalog.in_memory_catalog import InMemoryCatalog

__all__ = ["InMemoryCatalog"]
