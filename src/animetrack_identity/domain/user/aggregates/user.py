"""User aggregate: identity plus the three watch lists."""

from datetime import datetime
from typing import Iterable, Optional, Union

from animetrack.domain.catalog import MediaEntry
from animetrack.domain.shared.time import utc_now
from animetrack_identity.domain.user.exceptions import MediaAlreadyListedError
from animetrack_identity.domain.user.services.list_membership import listed_category
from animetrack_identity.domain.user.value_objects import Email, ListCategory


class User:
    """
    User aggregate root.

    Holds identity fields and the ``watching``, ``want_to_watch`` and
    ``completed`` lists. A media entry sits in at most one of the three
    lists at a time; every mutation goes through ``add_to_list`` and
    ``remove_from_list`` so the rule cannot be bypassed.

    ``id`` stays None until the user store assigns one on first save.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        name: str = "",
        password: Optional[str] = None,
        id: Optional[int] = None,
        watching: Iterable[MediaEntry] = (),
        want_to_watch: Iterable[MediaEntry] = (),
        completed: Iterable[MediaEntry] = (),
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._id = id
        self._name = name or ""
        self._password = password
        self._lists: dict[ListCategory, list[MediaEntry]] = {
            category: [] for category in ListCategory
        }
        for category, entries in (
            (ListCategory.WATCHING, watching),
            (ListCategory.WANT_TO_WATCH, want_to_watch),
            (ListCategory.COMPLETED, completed),
        ):
            for entry in entries:
                self._append(entry, category)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def password(self) -> Optional[str]:
        return self._password

    @property
    def watching(self) -> tuple[MediaEntry, ...]:
        return tuple(self._lists[ListCategory.WATCHING])

    @property
    def want_to_watch(self) -> tuple[MediaEntry, ...]:
        return tuple(self._lists[ListCategory.WANT_TO_WATCH])

    @property
    def completed(self) -> tuple[MediaEntry, ...]:
        return tuple(self._lists[ListCategory.COMPLETED])

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def list_for(self, category: Union[ListCategory, str]) -> tuple[MediaEntry, ...]:
        return tuple(self._lists[ListCategory.parse(category)])

    def category_of(self, entry: MediaEntry) -> Optional[ListCategory]:
        return listed_category(
            self._lists[ListCategory.WATCHING],
            self._lists[ListCategory.WANT_TO_WATCH],
            self._lists[ListCategory.COMPLETED],
            entry,
        )

    def add_to_list(
        self,
        entry: MediaEntry,
        category: Union[ListCategory, str],
    ) -> None:
        """Append ``entry`` to ``category``.

        Raises
        ------
        MediaAlreadyListedError
            If the entry is already in any list, the target list included
        InvalidListCategoryError
            If ``category`` is not a known category
        """
        current = self.category_of(entry)
        if current is not None:
            raise MediaAlreadyListedError(entry.id, current.value)
        self._lists[ListCategory.parse(category)].append(entry)
        self._updated_at = utc_now()

    def remove_from_list(
        self,
        entry: MediaEntry,
        category: Union[ListCategory, str],
    ) -> bool:
        """Remove ``entry`` from ``category``; returns False if it was not there."""
        entries = self._lists[ListCategory.parse(category)]
        if entry not in entries:
            return False
        entries.remove(entry)
        self._updated_at = utc_now()
        return True

    def _append(self, entry: MediaEntry, category: ListCategory) -> None:
        current = self.category_of(entry)
        if current is not None:
            raise MediaAlreadyListedError(entry.id, current.value)
        self._lists[category].append(entry)

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        name: str = "",
        password: Optional[str] = None,
    ) -> "User":
        return cls(email=email, name=name, password=password)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: int,
        email: Union[str, Email],
        name: str,
        password: Optional[str],
        watching: Iterable[MediaEntry],
        want_to_watch: Iterable[MediaEntry],
        completed: Iterable[MediaEntry],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            name=name,
            password=password,
            watching=watching,
            want_to_watch=want_to_watch,
            completed=completed,
            created_at=created_at,
            updated_at=updated_at,
        )

    def with_id(self, id: int) -> "User":
        """Copy of this user carrying a store-assigned id."""
        return self.reconstitute(
            id=id,
            email=self._email,
            name=self._name,
            password=self._password,
            watching=self.watching,
            want_to_watch=self.want_to_watch,
            completed=self.completed,
            created_at=self._created_at,
            updated_at=self._updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        if self._id is None:
            return id(self)
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value}, name={self._name!r})"
