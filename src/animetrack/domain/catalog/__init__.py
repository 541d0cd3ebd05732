"""Catalog domain: media entries users can track.

The catalog owns the entries and their lifecycle; this package only
exposes the read side needed to resolve an identifier to an entry.
"""

from animetrack.domain.catalog.catalog_lookup import CatalogLookup
from animetrack.domain.catalog.exceptions import MediaNotFoundError
from animetrack.domain.catalog.media_entry import MediaEntry

__all__ = [
    "CatalogLookup",
    "MediaEntry",
    "MediaNotFoundError",
]
