"""Dictionary-backed catalog lookup."""

from typing import Iterable, Optional

from animetrack.domain.catalog import CatalogLookup, MediaEntry, MediaNotFoundError


class InMemoryCatalog(CatalogLookup):
    """Catalog lookup over a fixed set of entries held in memory."""

    def __init__(self, entries: Optional[Iterable[MediaEntry]] = None) -> None:
        self._entries: dict[int, MediaEntry] = {}
        for entry in entries or ():
            self.add(entry)

    def add(self, entry: MediaEntry) -> None:
        self._entries[entry.id] = entry

    async def find_by_id(self, media_id: int) -> MediaEntry:
        entry = self._entries.get(media_id)
        if entry is None:
            raise MediaNotFoundError(media_id)
        return entry
