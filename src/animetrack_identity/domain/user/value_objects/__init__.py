"""Value objects for the user domain."""

from animetrack_identity.domain.user.value_objects.email import Email
from animetrack_identity.domain.user.value_objects.list_category import ListCategory

__all__ = [
    "Email",
    "ListCategory",
]
