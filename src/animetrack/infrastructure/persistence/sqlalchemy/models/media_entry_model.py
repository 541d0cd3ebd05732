"""SQLAlchemy model for catalog media entries."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from animetrack.infrastructure.persistence.sqlalchemy.models.base import Base


class MediaEntryModel(Base):
    """Catalog entry row.

    The catalog owns these rows; user lists only reference them by id.
    """

    __tablename__ = "media_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    def __repr__(self) -> str:
        return f"<MediaEntryModel(id={self.id}, title={self.title})>"
