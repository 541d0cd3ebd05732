"""Repository tests for UserRepositorySQLAlchemy on SQLite."""

import pytest
from sqlalchemy import func, insert, select
from sqlalchemy.exc import IntegrityError

from animetrack.domain.catalog import MediaEntry, MediaNotFoundError
from animetrack.domain.shared import ConcurrencyError
from animetrack.infrastructure.persistence.sqlalchemy import (
    CatalogRepositorySQLAlchemy,
    create_session_maker,
)
from animetrack_identity import (
    DuplicateUserError,
    ListCategory,
    ListMembershipManager,
    MediaAlreadyListedError,
    User,
)
from animetrack_identity.infrastructure.persistence.sqlalchemy import (
    UserListEntryModel,
    UserRepositorySQLAlchemy,
)
from tests.shared.fixtures.factories import make_user

TEST_EMAIL = "ana@example.com"


@pytest.fixture
def user_repo(db_session):
    return UserRepositorySQLAlchemy(db_session)


@pytest.fixture
def catalog(db_session):
    return CatalogRepositorySQLAlchemy(db_session)


def _lists_over(session) -> ListMembershipManager:
    return ListMembershipManager(
        UserRepositorySQLAlchemy(session), CatalogRepositorySQLAlchemy(session)
    )


async def _count_list_rows(session) -> int:
    result = await session.execute(select(func.count()).select_from(UserListEntryModel))
    return result.scalar_one()


class TestUserRepositorySQLAlchemy:
    @pytest.mark.asyncio
    async def test_save_assigns_id_and_round_trips(self, user_repo):
        saved = await user_repo.save(make_user(TEST_EMAIL, name="Ana"))

        found = await user_repo.find_by_id(saved.id)

        assert isinstance(saved.id, int)
        assert found is not None
        assert found.email == TEST_EMAIL
        assert found.name == "Ana"
        assert found.password == "secret1"
        assert found.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_find_by_id_not_found(self, user_repo):
        assert await user_repo.find_by_id(12345) is None
        assert not await user_repo.exists_by_id(12345)

    @pytest.mark.asyncio
    async def test_email_lookups_ignore_case(self, user_repo):
        await user_repo.save(make_user(TEST_EMAIL))

        assert await user_repo.exists_by_email("ANA@EXAMPLE.COM")
        found = await user_repo.find_by_email_ignore_case("Ana@Example.com")
        assert found is not None
        assert await user_repo.find_by_email_ignore_case("bob@example.com") is None

    @pytest.mark.asyncio
    async def test_unique_email_enforced_by_database(self, user_repo):
        await user_repo.save(make_user(TEST_EMAIL))

        with pytest.raises(DuplicateUserError):
            await user_repo.save(make_user(TEST_EMAIL.upper()))

    @pytest.mark.asyncio
    async def test_save_unknown_id(self, user_repo):
        with pytest.raises(ConcurrencyError):
            await user_repo.save(User(email=TEST_EMAIL, id=777))

    @pytest.mark.asyncio
    async def test_find_by_name_containing(self, user_repo):
        await user_repo.save(make_user("a@x.com", name="Ana"))
        await user_repo.save(make_user("b@x.com", name="Mariana"))
        await user_repo.save(make_user("c@x.com", name="50%_off"))

        found = await user_repo.find_by_name_containing_ignore_case("aNa")

        assert [u.name for u in found] == ["Ana", "Mariana"]
        literal = await user_repo.find_by_name_containing_ignore_case("%_")
        assert [u.name for u in literal] == ["50%_off"]

    @pytest.mark.asyncio
    async def test_find_all_in_id_order(self, user_repo):
        first = await user_repo.save(make_user("a@x.com"))
        second = await user_repo.save(make_user("b@x.com"))

        assert [u.id for u in await user_repo.find_all()] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_lists_round_trip_in_order(self, user_repo, catalog):
        user = make_user()
        for media_id in (3, 1):
            user.add_to_list(await catalog.find_by_id(media_id), ListCategory.WATCHING)
        user.add_to_list(await catalog.find_by_id(7), ListCategory.COMPLETED)

        saved = await user_repo.save(user)
        found = await user_repo.find_by_id(saved.id)

        assert [e.id for e in found.watching] == [3, 1]
        assert [e.title for e in found.watching] == ["Planetes", "Cowboy Bebop"]
        assert [e.id for e in found.completed] == [7]
        assert found.want_to_watch == ()

    @pytest.mark.asyncio
    async def test_update_returns_stored_copy(self, user_repo, catalog):
        bebop = await catalog.find_by_id(1)
        saved = await user_repo.save(make_user())
        saved.add_to_list(bebop, ListCategory.WATCHING)

        updated = await user_repo.save(saved)
        saved.remove_from_list(bebop, ListCategory.WATCHING)

        assert updated is not saved
        assert updated == saved
        assert updated.watching == (bebop,)

    @pytest.mark.asyncio
    async def test_moving_entry_updates_row_in_place(
        self, user_repo, catalog, db_session
    ):
        bebop = await catalog.find_by_id(1)
        user = make_user()
        user.add_to_list(bebop, ListCategory.WATCHING)
        saved = await user_repo.save(user)

        saved.remove_from_list(bebop, ListCategory.WATCHING)
        saved.add_to_list(bebop, ListCategory.COMPLETED)
        await user_repo.save(saved)

        found = await user_repo.find_by_id(saved.id)
        assert found.watching == ()
        assert found.completed == (bebop,)
        assert await _count_list_rows(db_session) == 1

    @pytest.mark.asyncio
    async def test_listing_unknown_media(self, user_repo):
        user = make_user()
        user.add_to_list(MediaEntry(id=4040), ListCategory.WATCHING)

        with pytest.raises(MediaNotFoundError):
            await user_repo.save(user)

    @pytest.mark.asyncio
    async def test_delete_removes_list_rows(self, user_repo, catalog, db_session):
        user = make_user()
        user.add_to_list(await catalog.find_by_id(2), ListCategory.WANT_TO_WATCH)
        saved = await user_repo.save(user)

        await user_repo.delete_by_id(saved.id)

        assert await user_repo.find_by_id(saved.id) is None
        assert await _count_list_rows(db_session) == 0

    @pytest.mark.asyncio
    async def test_delete_user_object(self, user_repo):
        saved = await user_repo.save(make_user())

        await user_repo.delete(saved)

        assert await user_repo.find_all() == []

    @pytest.mark.asyncio
    async def test_one_row_per_user_and_entry(self, user_repo, db_session):
        saved = await user_repo.save(make_user())
        row = {"user_id": saved.id, "media_id": 1, "position": 0}
        await db_session.execute(
            insert(UserListEntryModel).values(**row, category="watching")
        )

        with pytest.raises(IntegrityError):
            await db_session.execute(
                insert(UserListEntryModel).values(**row, category="completed")
            )


class TestUserRepositoryAcrossSessions:
    """Two sessions on one database file stand in for two processes."""

    @pytest.mark.asyncio
    async def test_stale_add_rejected_by_list_key(self, sqlite_file_engine):
        session_maker = create_session_maker(sqlite_file_engine)
        async with session_maker() as session:
            user = await UserRepositorySQLAlchemy(session).save(make_user())
            await session.commit()

        async with session_maker() as first, session_maker() as second:
            # Both load the user before either one writes
            await UserRepositorySQLAlchemy(first).find_by_id(user.id)
            await UserRepositorySQLAlchemy(second).find_by_id(user.id)

            await _lists_over(first).add_to_list(user.id, 1, ListCategory.WATCHING)
            await first.commit()

            with pytest.raises(MediaAlreadyListedError) as exc_info:
                await _lists_over(second).add_to_list(
                    user.id, 1, ListCategory.COMPLETED
                )
            await second.rollback()

        assert isinstance(exc_info.value.__cause__, IntegrityError)
        async with session_maker() as session:
            found = await UserRepositorySQLAlchemy(session).find_by_id(user.id)
        assert [e.id for e in found.watching] == [1]
        assert found.completed == ()


class TestCatalogRepositorySQLAlchemy:
    @pytest.mark.asyncio
    async def test_find_by_id(self, catalog):
        entry = await catalog.find_by_id(2)

        assert entry.id == 2
        assert entry.title == "Mushishi"

    @pytest.mark.asyncio
    async def test_unknown_entry(self, catalog):
        with pytest.raises(MediaNotFoundError):
            await catalog.find_by_id(999)
