"""SQLAlchemy implementation of CatalogLookup."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from animetrack.domain.catalog import CatalogLookup, MediaEntry, MediaNotFoundError
from animetrack.infrastructure.persistence.sqlalchemy.models import MediaEntryModel


class CatalogRepositorySQLAlchemy(CatalogLookup):
    """Read-only catalog lookup backed by the media_entries table."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, media_id: int) -> MediaEntry:
        stmt = select(MediaEntryModel).where(MediaEntryModel.id == media_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            raise MediaNotFoundError(media_id)

        return MediaEntry(id=model.id, title=model.title)
