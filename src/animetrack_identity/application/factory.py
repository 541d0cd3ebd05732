"""Wiring for the identity application services."""

from dataclasses import dataclass
from typing import Optional

from animetrack.domain.catalog import CatalogLookup
from animetrack_config.settings import Settings
from animetrack_identity.application.services import (
    DEFAULT_PASSWORD_MIN_LENGTH,
    ListMembershipManager,
    UserLocks,
    UserRegistry,
)
from animetrack_identity.domain.user import UserRepository


@dataclass(frozen=True)
class IdentityServices:
    registry: UserRegistry
    lists: ListMembershipManager


def create_identity_services(
    user_repository: UserRepository,
    catalog: CatalogLookup,
    settings: Optional[Settings] = None,
) -> IdentityServices:
    """Build both services over one shared set of per-user locks.

    Sharing the locks keeps a registry update from overwriting a list
    mutation that is in flight for the same user.
    """
    locks = UserLocks()
    min_length = (
        settings.password_min_length if settings else DEFAULT_PASSWORD_MIN_LENGTH
    )
    return IdentityServices(
        registry=UserRegistry(user_repository, password_min_length=min_length, locks=locks),
        lists=ListMembershipManager(user_repository, catalog, locks=locks),
    )
