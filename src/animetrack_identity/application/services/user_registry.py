import logging
from typing import Optional

from animetrack.domain.catalog import MediaEntry
from animetrack_identity.application.services.user_locks import UserLocks
from animetrack_identity.domain.user import (
    DuplicateUserError,
    InvalidPasswordError,
    User,
    UserNotFoundError,
    UserRepository,
)

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD_MIN_LENGTH = 6


class UserRegistry:
    """Create/update/delete/find lifecycle for user records.

    Enforces that no two users share an email (case-insensitive) and that
    a password of at least ``password_min_length`` characters is present
    when a user is created. Passwords are not re-checked on update, since
    update carries whatever password the submitted record holds.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_min_length: int = DEFAULT_PASSWORD_MIN_LENGTH,
        locks: Optional[UserLocks] = None,
    ):
        self._user_repo = user_repository
        self._password_min_length = password_min_length
        self._locks = locks or UserLocks()

    async def create(self, user: User) -> User:
        if await self._user_repo.exists_by_email(user.email):
            logger.debug("Rejected registration, email taken: %s", user.email)
            raise DuplicateUserError(user.email)

        self._validate_password(user.password)

        return await self._user_repo.save(user)

    async def update(self, user: User) -> User:
        if user.id is None:
            raise UserNotFoundError()

        async with self._locks.hold(user.id):
            if not await self._user_repo.exists_by_id(user.id):
                raise UserNotFoundError(user.id)

            holder = await self._user_repo.find_by_email_ignore_case(user.email)
            if holder is not None and holder.id != user.id:
                logger.debug("Rejected update of %s, email taken: %s", user.id, user.email)
                raise DuplicateUserError(user.email)

            saved = await self._user_repo.save(user)

        logger.info("Updated user: %s", saved.id)
        return saved

    async def delete(self, user: User) -> None:
        if user.id is None:
            raise UserNotFoundError()

        async with self._locks.hold(user.id):
            if not await self._user_repo.exists_by_id(user.id):
                raise UserNotFoundError(user.id)
            await self._user_repo.delete(user)

    async def delete_by_id(self, user_id: int) -> None:
        async with self._locks.hold(user_id):
            if not await self._user_repo.exists_by_id(user_id):
                raise UserNotFoundError(user_id)
            await self._user_repo.delete_by_id(user_id)

    async def find_all(self) -> list[User]:
        return await self._user_repo.find_all()

    async def find_by_id(self, user_id: int) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def find_by_name(self, fragment: str) -> list[User]:
        return await self._user_repo.find_by_name_containing_ignore_case(fragment)

    async def find_by_email(self, email: str) -> User:
        user = await self._user_repo.find_by_email_ignore_case(email)
        if user is None:
            raise UserNotFoundError(email)
        return user

    async def get_watching(self, user_id: int) -> tuple[MediaEntry, ...]:
        return (await self.find_by_id(user_id)).watching

    async def get_completed(self, user_id: int) -> tuple[MediaEntry, ...]:
        return (await self.find_by_id(user_id)).completed

    async def get_want_to_watch(self, user_id: int) -> tuple[MediaEntry, ...]:
        return (await self.find_by_id(user_id)).want_to_watch

    def _validate_password(self, password: Optional[str]) -> None:
        if password is None or len(password) < self._password_min_length:
            raise InvalidPasswordError(self._password_min_length)
