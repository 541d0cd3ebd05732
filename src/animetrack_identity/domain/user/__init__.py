"""User domain: accounts and their watch lists.

This domain handles:
- User aggregate (identity: id, name, email, password)
- The three mutually exclusive watch lists per user
- The repository port used to persist users
"""

from animetrack_identity.domain.user.aggregates import User
from animetrack_identity.domain.user.exceptions import (
    DuplicateUserError,
    InvalidEmailError,
    InvalidListCategoryError,
    InvalidOperationError,
    InvalidPasswordError,
    MediaAlreadyListedError,
    UserNotFoundError,
)
from animetrack_identity.domain.user.repositories import UserRepository
from animetrack_identity.domain.user.services import is_listed, listed_category
from animetrack_identity.domain.user.value_objects import Email, ListCategory

__all__ = [
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
    "is_listed",
    "listed_category",
]
