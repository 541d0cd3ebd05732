"""SQLAlchemy models shared across packages."""

from animetrack.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from animetrack.infrastructure.persistence.sqlalchemy.models.media_entry_model import (
    MediaEntryModel,
)

__all__ = [
    "Base",
    "MediaEntryModel",
    "TimestampMixin",
]
