"""Logging configuration for processes that embed animetrack."""

import logging
import sys
from typing import Optional

from animetrack_config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure logging for the application.

    - Console output with timestamps and module names
    - Configurable log level for animetrack modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("animetrack").setLevel(log_level)
    logging.getLogger("animetrack_identity").setLevel(log_level)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)
