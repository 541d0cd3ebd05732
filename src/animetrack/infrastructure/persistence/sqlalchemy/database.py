"""Engine, session and schema helpers."""

import asyncio
import logging
import sys
from typing import Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from animetrack.infrastructure.persistence.sqlalchemy.models.base import Base
from animetrack_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def _register_models() -> None:
    # Importing the model modules registers their tables with Base.metadata
    import animetrack.infrastructure.persistence.sqlalchemy.models  # noqa: F401
    import animetrack_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401


def create_engine(settings: Optional[Settings] = None) -> AsyncEngine:
    """Create the async engine for the configured database."""
    settings = settings or get_settings()
    return create_async_engine(
        settings.database_url,
        echo=False,
        pool_pre_ping=True,
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(engine: Optional[AsyncEngine] = None) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    _register_models()
    owned = engine is None
    engine = engine or create_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if owned:
        await engine.dispose()
    logger.info("Database schema is up to date")


async def drop_tables(engine: Optional[AsyncEngine] = None) -> None:
    """Drop all database tables (USE WITH CAUTION!)."""
    _register_models()
    owned = engine is None
    engine = engine or create_engine()
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    if owned:
        await engine.dispose()
    logger.info("Database tables dropped successfully")


def _display_url(database_url: str) -> str:
    return database_url.split("@")[-1] if "@" in database_url else database_url


async def _reset_database(force: bool = False) -> None:
    settings = get_settings()
    print(f"Database: {_display_url(settings.database_url)}")
    print()

    if not force:
        print("WARNING: This will DELETE ALL DATA in the database!")
        print()
        response = input("Type 'yes' to confirm: ")
        if response.lower() != "yes":
            print("Aborted.")
            sys.exit(1)
        print()

    await drop_tables()
    await create_tables()
    logger.info("Database recreated successfully!")


def db_init() -> None:
    """Initialize database (create tables)."""
    from animetrack.logging_setup import setup_logging

    setup_logging()
    logger.info("Initializing database: %s", _display_url(get_settings().database_url))
    asyncio.run(create_tables())


def db_reset() -> None:
    """Drop and recreate all database tables."""
    from animetrack.logging_setup import setup_logging

    setup_logging()
    force = "--force" in sys.argv or "-f" in sys.argv
    asyncio.run(_reset_database(force=force))
