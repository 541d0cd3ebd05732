"""animetrack identity - user accounts and their watch lists.

This package handles:
- User records (create, update, delete, lookups) with unique emails
  and a minimum password length at registration
- The watching / want-to-watch / completed lists of each user, where an
  entry occupies at most one list at a time

Media entries themselves are owned by the catalog (animetrack.domain.catalog);
users only hold references to them.
"""

from animetrack_identity.application.factory import (
    IdentityServices,
    create_identity_services,
)
from animetrack_identity.application.services import (
    ListMembershipManager,
    UserLocks,
    UserRegistry,
)
from animetrack_identity.domain.user import (
    DuplicateUserError,
    Email,
    InvalidEmailError,
    InvalidListCategoryError,
    InvalidOperationError,
    InvalidPasswordError,
    ListCategory,
    MediaAlreadyListedError,
    User,
    UserNotFoundError,
    UserRepository,
)

__all__ = [
    # Domain - User
    "DuplicateUserError",
    "Email",
    "InvalidEmailError",
    "InvalidListCategoryError",
    "InvalidOperationError",
    "InvalidPasswordError",
    "ListCategory",
    "MediaAlreadyListedError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    # Application Services
    "IdentityServices",
    "ListMembershipManager",
    "UserLocks",
    "UserRegistry",
    "create_identity_services",
]
