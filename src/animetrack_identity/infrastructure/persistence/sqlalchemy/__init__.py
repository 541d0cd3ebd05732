"""SQLAlchemy implementation for animetrack_identity persistence.

Provides:
- UserModel: SQLAlchemy model for users
- UserListEntryModel: one row per listed entry, keyed by (user, media)
- UserRepositorySQLAlchemy: Repository implementation for users
"""

from animetrack_identity.infrastructure.persistence.sqlalchemy.models import (
    UserListEntryModel,
    UserModel,
)
from animetrack_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "UserListEntryModel",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
