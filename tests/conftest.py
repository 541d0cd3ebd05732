"""Root pytest configuration for test discovery and auto-skip behavior.

Test Structure:
    tests/
    ├── animetrack/            # Shared domain, catalog, config, logging
    │   ├── unit/
    │   └── integration/
    ├── animetrack_identity/   # Users and watch lists
    │   ├── unit/
    │   └── integration/       # SQLite-backed, plus Postgres via Testcontainers
    └── shared/                # Shared fixtures and utilities

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests (needs Docker)
    RUN_ALL_TESTS=1      Run all tests (overrides other settings)

Pytest Options:
    --run-integration    Run integration tests
    --run-all            Run all tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from animetrack_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")


def _enabled(value: str | None) -> bool:
    return (value or "").lower() in ("1", "true", "yes")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run all tests regardless of markers",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests against a real PostgreSQL container (auto-skipped)",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip integration tests unless explicitly enabled."""
    if config.getoption("--run-all") or _enabled(os.environ.get("RUN_ALL_TESTS")):
        return

    run_integration = config.getoption("--run-integration") or _enabled(
        os.environ.get("RUN_INTEGRATION"),
    )
    if run_integration:
        return

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        # Explicit marker only, not folder name
        if "integration" in {mark.name for mark in item.iter_markers()}:
            item.add_marker(skip_integration)


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and finish the session with a fresh settings cache."""
    clear_settings_cache()
    yield
    clear_settings_cache()
