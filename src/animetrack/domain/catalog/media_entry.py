"""Media entry value object.

Entries are owned by the catalog. Users only keep references to them, so
two entries are the same entry whenever their ids match.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MediaEntry:
    """Reference to a catalog-owned media entry (anime or similar)."""

    id: int
    title: str = field(default="", compare=False)

    def __repr__(self) -> str:
        return f"MediaEntry(id={self.id}, title={self.title!r})"
