"""Tests for the schema helpers on SQLite."""

import pytest
from sqlalchemy import inspect

from animetrack.infrastructure.persistence.sqlalchemy import create_tables, drop_tables


async def _table_names(engine) -> set[str]:
    async with engine.connect() as conn:
        return set(await conn.run_sync(lambda sync: inspect(sync).get_table_names()))


class TestSchemaHelpers:
    @pytest.mark.asyncio
    async def test_create_and_drop(self, sqlite_engine):
        await create_tables(sqlite_engine)

        assert {"users", "user_list_entries", "media_entries"} <= await _table_names(
            sqlite_engine
        )

        await drop_tables(sqlite_engine)

        assert await _table_names(sqlite_engine) == set()

    @pytest.mark.asyncio
    async def test_create_is_idempotent(self, sqlite_engine):
        await create_tables(sqlite_engine)
        await create_tables(sqlite_engine)

        assert "users" in await _table_names(sqlite_engine)
