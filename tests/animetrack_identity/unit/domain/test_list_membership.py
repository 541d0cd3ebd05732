"""Unit tests for the list exclusivity check."""

from animetrack.domain.catalog import MediaEntry
from animetrack_identity.domain.user import ListCategory, is_listed, listed_category

BEBOP = MediaEntry(id=1, title="Cowboy Bebop")
MUSHISHI = MediaEntry(id=2, title="Mushishi")
PLANETES = MediaEntry(id=3, title="Planetes")


class TestListedCategory:
    def test_absent_entry(self):
        assert listed_category([BEBOP], [MUSHISHI], [], PLANETES) is None
        assert is_listed([BEBOP], [MUSHISHI], [], PLANETES) is False

    def test_finds_each_category(self):
        assert listed_category([BEBOP], [], [], BEBOP) is ListCategory.WATCHING
        assert listed_category([], [BEBOP], [], BEBOP) is ListCategory.WANT_TO_WATCH
        assert listed_category([], [], [BEBOP], BEBOP) is ListCategory.COMPLETED

    def test_matches_by_id_not_title(self):
        renamed = MediaEntry(id=BEBOP.id, title="Bebop (remaster)")

        assert is_listed([], [BEBOP], [], renamed) is True

    def test_empty_lists(self):
        assert is_listed((), (), (), BEBOP) is False
