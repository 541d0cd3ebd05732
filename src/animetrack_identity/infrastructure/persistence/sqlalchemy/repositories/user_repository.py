"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from animetrack.domain.catalog import MediaEntry, MediaNotFoundError
from animetrack.domain.shared.exceptions import ConcurrencyError
from animetrack.domain.shared.time import ensure_tz_aware
from animetrack.infrastructure.persistence.sqlalchemy.models import MediaEntryModel
from animetrack_identity.domain.user import (
    DuplicateUserError,
    ListCategory,
    MediaAlreadyListedError,
    User,
    UserRepository,
)
from animetrack_identity.infrastructure.persistence.sqlalchemy.models import (
    UserListEntryModel,
    UserModel,
)

logger = logging.getLogger(__name__)

# Postgres names the primary key constraint; SQLite names its columns.
LIST_ENTRY_KEY_MARKERS = (
    "user_list_entries_pkey",
    "user_list_entries.user_id, user_list_entries.media_id",
)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Flushes but never commits; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(UserModel.id).where(self._email_matches(email))
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def exists_by_id(self, user_id: int) -> bool:
        stmt = select(UserModel.id).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def save(self, user: User) -> User:
        try:
            if user.id is None:
                model = self._map_to_model(user)
                await self._sync_list_entries(model, user)
                self._session.add(model)
                await self._session.flush()
                stored = self._map_to_domain(model)
                logger.info("Created user: %s (email: %s)", stored.id, stored.email)
            else:
                model = await self._find_model_by_id(user.id)
                if model is None:
                    msg = f"User {user.id} is no longer stored"
                    raise ConcurrencyError(msg, details={"user_id": user.id})
                self._update_model(model, user)
                await self._sync_list_entries(model, user)
                await self._session.flush()
                stored = self._map_to_domain(model)
                logger.debug("Updated user: %s", user.id)
        except IntegrityError as e:
            message = str(e.orig).lower()
            if any(marker in message for marker in LIST_ENTRY_KEY_MARKERS):
                raise MediaAlreadyListedError() from e
            if "email" in message:
                raise DuplicateUserError(user.email) from e
            raise

        return stored

    async def delete(self, user: User) -> None:
        if user.id is not None:
            await self.delete_by_id(user.id)

    async def delete_by_id(self, user_id: int) -> None:
        model = await self._find_model_by_id(user_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Deleted user: %s", user_id)

    async def find_all(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.id)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def find_by_id(self, user_id: int) -> Optional[User]:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_email_ignore_case(self, email: str) -> Optional[User]:
        stmt = select(UserModel).where(self._email_matches(email))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_name_containing_ignore_case(self, fragment: str) -> list[User]:
        stmt = (
            select(UserModel)
            .where(UserModel.name.icontains(fragment, autoescape=True))
            .order_by(UserModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def _find_model_by_id(self, user_id: int) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _email_matches(email: str):
        return func.lower(UserModel.email) == email.strip().lower()

    async def _sync_list_entries(self, model: UserModel, user: User) -> None:
        """Bring the model's list rows in line with the user's lists.

        Rows for entries that stay listed are updated in place, so an
        entry never gets deleted and re-inserted under the same key.
        """
        wanted: dict[int, tuple[ListCategory, int]] = {}
        for category in ListCategory:
            for position, entry in enumerate(user.list_for(category)):
                wanted[entry.id] = (category, position)

        for row in list(model.list_entries):
            placement = wanted.pop(row.media_id, None)
            if placement is None:
                model.list_entries.remove(row)
            else:
                row.category = placement[0].value
                row.position = placement[1]

        for media_id, (category, position) in wanted.items():
            media = await self._session.get(MediaEntryModel, media_id)
            if media is None:
                raise MediaNotFoundError(media_id)
            model.list_entries.append(
                UserListEntryModel(
                    media_id=media_id,
                    media=media,
                    category=category.value,
                    position=position,
                )
            )

    def _map_to_domain(self, model: UserModel) -> User:
        lists: dict[ListCategory, list[tuple[int, MediaEntry]]] = {
            category: [] for category in ListCategory
        }
        for row in model.list_entries:
            entry = MediaEntry(id=row.media_id, title=row.media.title)
            lists[ListCategory(row.category)].append((row.position, entry))

        def ordered(category: ListCategory) -> list[MediaEntry]:
            return [entry for _, entry in sorted(lists[category], key=lambda p: p[0])]

        return User.reconstitute(
            id=model.id,
            email=model.email,
            name=model.name,
            password=model.password,
            watching=ordered(ListCategory.WATCHING),
            want_to_watch=ordered(ListCategory.WANT_TO_WATCH),
            completed=ordered(ListCategory.COMPLETED),
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            name=user.name,
            email=user.email,
            password=user.password,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.name = user.name
        model.email = user.email
        model.password = user.password
        model.updated_at = user.updated_at
