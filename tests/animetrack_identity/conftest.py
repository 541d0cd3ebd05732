"""
Pytest configuration for animetrack_identity tests.

Provides an in-memory catalog and user store plus the wired services.
"""

import pytest

from animetrack.infrastructure.catalog import InMemoryCatalog
from animetrack_identity import create_identity_services
from animetrack_identity.infrastructure.persistence.memory import (
    InMemoryUserRepository,
)
from tests.shared.fixtures.factories import MEDIA_ENTRIES


@pytest.fixture
def catalog() -> InMemoryCatalog:
    return InMemoryCatalog(MEDIA_ENTRIES)


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def services(user_repo, catalog):
    return create_identity_services(user_repo, catalog)


@pytest.fixture
def registry(services):
    return services.registry


@pytest.fixture
def lists(services):
    return services.lists
