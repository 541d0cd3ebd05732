"""Application services for accounts and watch lists."""

from animetrack_identity.application.services.list_membership_manager import (
    ListMembershipManager,
)
from animetrack_identity.application.services.user_locks import UserLocks
from animetrack_identity.application.services.user_registry import (
    DEFAULT_PASSWORD_MIN_LENGTH,
    UserRegistry,
)

__all__ = [
    "DEFAULT_PASSWORD_MIN_LENGTH",
    "ListMembershipManager",
    "UserLocks",
    "UserRegistry",
]
