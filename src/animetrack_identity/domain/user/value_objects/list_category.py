from enum import Enum
from typing import Union

from animetrack_identity.domain.user.exceptions import InvalidListCategoryError


class ListCategory(str, Enum):
    """Watch-status buckets a media entry can occupy for a user."""

    WATCHING = "watching"
    WANT_TO_WATCH = "want_to_watch"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, value: Union["ListCategory", str]) -> "ListCategory":
        """Coerce untyped input into a category.

        Accepts members, member names and values in any case
        ("WANT_TO_WATCH", "want_to_watch", "want-to-watch").
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidListCategoryError(value)

        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise InvalidListCategoryError(value) from None
