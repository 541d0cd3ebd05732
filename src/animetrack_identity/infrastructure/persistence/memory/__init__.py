"""In-memory user store."""

from animetrack_identity.infrastructure.persistence.memory.user_repository import (
    InMemoryUserRepository,
)

__all__ = ["InMemoryUserRepository"]
