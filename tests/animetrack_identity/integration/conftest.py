"""
Pytest configuration for animetrack_identity integration tests.

Import the shared database fixtures to make them available.
"""

from tests.shared.fixtures.database import (
    db_session,
    pg_engine,
    pg_session,
    postgres_container,
    sqlite_engine,
    sqlite_file_engine,
)

__all__ = [
    "db_session",
    "pg_engine",
    "pg_session",
    "postgres_container",
    "sqlite_engine",
    "sqlite_file_engine",
]
