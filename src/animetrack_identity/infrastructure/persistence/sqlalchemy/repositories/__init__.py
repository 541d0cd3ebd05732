# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations for identity management."""

from animetrack_identity.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = ["UserRepositorySQLAlchemy"]
