"""Per-user mutual exclusion for read-check-persist sequences."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class UserLocks:
    """Registry of one asyncio.Lock per user id.

    A lock lives only while some coroutine holds or waits for it, so the
    registry does not grow with the number of users ever seen. Locks are
    process-local; cross-process exclusivity is left to the store.
    """

    def __init__(self) -> None:
        self._locks: dict[int, asyncio.Lock] = {}
        self._holders: dict[int, int] = {}

    @asynccontextmanager
    async def hold(self, user_id: int) -> AsyncIterator[None]:
        lock = self._locks.setdefault(user_id, asyncio.Lock())
        self._holders[user_id] = self._holders.get(user_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[user_id] -= 1
            if self._holders[user_id] == 0:
                del self._holders[user_id]
                del self._locks[user_id]

    def __len__(self) -> int:
        return len(self._locks)
