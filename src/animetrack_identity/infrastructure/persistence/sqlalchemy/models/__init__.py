# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for users and their watch lists."""

from animetrack_identity.infrastructure.persistence.sqlalchemy.models.user_list_entry_model import (
    UserListEntryModel,
)
from animetrack_identity.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "UserListEntryModel",
    "UserModel",
]
