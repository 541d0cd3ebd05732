"""Exclusivity check across a user's three watch lists.

An entry may occupy at most one list per user. The check only looks at
the lists it is handed; it never touches storage.
"""

from typing import Optional, Sequence

from animetrack.domain.catalog import MediaEntry
from animetrack_identity.domain.user.value_objects import ListCategory


def listed_category(
    watching: Sequence[MediaEntry],
    want_to_watch: Sequence[MediaEntry],
    completed: Sequence[MediaEntry],
    entry: MediaEntry,
) -> Optional[ListCategory]:
    """Return the category currently holding ``entry``, or None."""
    if entry in watching:
        return ListCategory.WATCHING
    if entry in want_to_watch:
        return ListCategory.WANT_TO_WATCH
    if entry in completed:
        return ListCategory.COMPLETED
    return None


def is_listed(
    watching: Sequence[MediaEntry],
    want_to_watch: Sequence[MediaEntry],
    completed: Sequence[MediaEntry],
    entry: MediaEntry,
) -> bool:
    return listed_category(watching, want_to_watch, completed, entry) is not None
