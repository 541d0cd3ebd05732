"""Domain services for the user domain."""

from animetrack_identity.domain.user.services.list_membership import (
    is_listed,
    listed_category,
)

__all__ = [
    "is_listed",
    "listed_category",
]
