"""Catalog lookup port."""

from abc import ABC, abstractmethod

from animetrack.domain.catalog.media_entry import MediaEntry


class CatalogLookup(ABC):
    """Resolves media identifiers to catalog entries."""

    @abstractmethod
    async def find_by_id(self, media_id: int) -> MediaEntry:
        """
        Resolve a media entry by its identifier.

        Parameters
        ----------
        media_id
            Catalog identifier of the entry

        Returns
        -------
        The resolved MediaEntry

        Raises
        ------
        MediaNotFoundError
            If the catalog has no entry with this identifier
        """
