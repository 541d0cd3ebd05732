"""SQLAlchemy persistence shared by all animetrack packages.

Provides:
- Base / TimestampMixin: declarative base for every model
- MediaEntryModel: catalog entries referenced by user lists
- CatalogRepositorySQLAlchemy: read-only catalog lookup
- Engine/session helpers and schema management
"""

from animetrack.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_maker,
    create_tables,
    drop_tables,
)
from animetrack.infrastructure.persistence.sqlalchemy.models import (
    Base,
    MediaEntryModel,
    TimestampMixin,
)
from animetrack.infrastructure.persistence.sqlalchemy.repositories import (
    CatalogRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "CatalogRepositorySQLAlchemy",
    "MediaEntryModel",
    "TimestampMixin",
    "create_engine",
    "create_session_maker",
    "create_tables",
    "drop_tables",
]
