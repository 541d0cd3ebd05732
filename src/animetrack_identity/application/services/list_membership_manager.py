import logging
from typing import Optional, Union

from animetrack.domain.catalog import CatalogLookup
from animetrack_identity.application.services.user_locks import UserLocks
from animetrack_identity.domain.user import (
    InvalidOperationError,
    ListCategory,
    User,
    UserNotFoundError,
    UserRepository,
)

logger = logging.getLogger(__name__)


class ListMembershipManager:
    """Adds and removes catalog entries on a user's watch lists.

    An entry may sit in at most one of the three lists. Moving an entry
    between lists takes a remove followed by an add; adding an entry that
    is already listed anywhere, its target list included, is rejected.

    Each mutation reloads the stored user, applies the change and saves it
    while holding that user's lock, so concurrent mutations on the same
    user cannot both pass the exclusivity check. The returned user is the
    persisted record; a ``User`` passed in is only used for its id.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        catalog: CatalogLookup,
        locks: Optional[UserLocks] = None,
    ):
        self._user_repo = user_repository
        self._catalog = catalog
        self._locks = locks or UserLocks()

    async def add_to_list(
        self,
        user: Union[User, int],
        media_id: int,
        category: Union[ListCategory, str],
    ) -> User:
        user_id = self._user_id(user)
        entry = await self._catalog.find_by_id(media_id)

        async with self._locks.hold(user_id):
            current = await self._load(user_id)
            try:
                current.add_to_list(entry, category)
            except InvalidOperationError as e:
                logger.debug(
                    "Rejected adding media %s for user %s: %s", media_id, user_id, e
                )
                raise
            saved = await self._user_repo.save(current)

        logger.info(
            "Added media %s to %s for user %s",
            media_id,
            ListCategory.parse(category).value,
            user_id,
        )
        return saved

    async def remove_from_list(
        self,
        user: Union[User, int],
        media_id: int,
        category: Union[ListCategory, str],
    ) -> User:
        user_id = self._user_id(user)
        entry = await self._catalog.find_by_id(media_id)
        target = ListCategory.parse(category)

        async with self._locks.hold(user_id):
            current = await self._load(user_id)
            removed = current.remove_from_list(entry, target)
            saved = await self._user_repo.save(current)

        if removed:
            logger.info(
                "Removed media %s from %s for user %s", media_id, target.value, user_id
            )
        else:
            logger.debug(
                "Media %s was not in %s for user %s", media_id, target.value, user_id
            )
        return saved

    async def _load(self, user_id: int) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    @staticmethod
    def _user_id(user: Union[User, int]) -> int:
        user_id = user.id if isinstance(user, User) else user
        if user_id is None:
            raise UserNotFoundError()
        return user_id
