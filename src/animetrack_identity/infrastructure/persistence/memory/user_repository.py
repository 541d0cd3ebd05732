"""In-memory implementation of UserRepository."""

import copy
import itertools
import logging
from typing import Optional

from animetrack.domain.shared.exceptions import ConcurrencyError
from animetrack_identity.domain.user import (
    DuplicateUserError,
    User,
    UserRepository,
)

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """Dictionary-backed user store.

    Records are copied on the way in and on the way out, so callers get
    snapshots and never share state with the store or with each other.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._ids = itertools.count(1)

    async def exists_by_email(self, email: str) -> bool:
        return self._find_by_email(email) is not None

    async def exists_by_id(self, user_id: int) -> bool:
        return user_id in self._users

    async def save(self, user: User) -> User:
        holder = self._find_by_email(user.email)
        if holder is not None and holder.id != user.id:
            raise DuplicateUserError(user.email)

        if user.id is None:
            stored = user.with_id(next(self._ids))
            logger.info("Created user: %s (email: %s)", stored.id, stored.email)
        elif user.id in self._users:
            stored = copy.deepcopy(user)
            logger.debug("Updated user: %s", user.id)
        else:
            msg = f"User {user.id} is no longer stored"
            raise ConcurrencyError(msg, details={"user_id": user.id})

        self._users[stored.id] = stored
        return copy.deepcopy(stored)

    async def delete(self, user: User) -> None:
        if user.id is not None:
            await self.delete_by_id(user.id)

    async def delete_by_id(self, user_id: int) -> None:
        if self._users.pop(user_id, None) is not None:
            logger.info("Deleted user: %s", user_id)

    async def find_all(self) -> list[User]:
        return [copy.deepcopy(self._users[key]) for key in sorted(self._users)]

    async def find_by_id(self, user_id: int) -> Optional[User]:
        user = self._users.get(user_id)
        return copy.deepcopy(user) if user is not None else None

    async def find_by_email_ignore_case(self, email: str) -> Optional[User]:
        user = self._find_by_email(email)
        return copy.deepcopy(user) if user is not None else None

    async def find_by_name_containing_ignore_case(self, fragment: str) -> list[User]:
        needle = fragment.lower()
        return [
            copy.deepcopy(self._users[key])
            for key in sorted(self._users)
            if needle in self._users[key].name.lower()
        ]

    def _find_by_email(self, email: str) -> Optional[User]:
        wanted = email.strip().lower()
        for user in self._users.values():
            if user.email.lower() == wanted:
                return user
        return None
