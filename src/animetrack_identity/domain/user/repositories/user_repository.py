"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from animetrack_identity.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check whether any user holds ``email`` (case-insensitive)."""

    @abstractmethod
    async def exists_by_id(self, user_id: int) -> bool:
        """Check whether a user with ``user_id`` is stored."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Save or update a user.

        If the user has no id yet, the store assigns one and inserts the
        record. Otherwise the stored record is overwritten.

        Parameters
        ----------
        user
            The user to save

        Returns
        -------
        The stored user, carrying its id

        Raises
        ------
        DuplicateUserError
            If the email is already held by another stored user
        ConcurrencyError
            If the user carries an id that is no longer stored
        """

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Delete the stored record of ``user``."""

    @abstractmethod
    async def delete_by_id(self, user_id: int) -> None:
        """Delete a user by ID."""

    @abstractmethod
    async def find_all(self) -> list[User]:
        """List all users (store-defined order)."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email_ignore_case(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case."""

    @abstractmethod
    async def find_by_name_containing_ignore_case(self, fragment: str) -> list[User]:
        """Find users whose name contains ``fragment``, ignoring case."""
