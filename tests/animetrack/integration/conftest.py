"""Database fixtures for animetrack integration tests."""

from tests.shared.fixtures.database import sqlite_engine

__all__ = ["sqlite_engine"]
