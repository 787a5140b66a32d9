"""
Test Suite: scenario list management
"""

import pytest

from journey.scenarios import ScenarioBook
from journey.spells import BOTH_SPELLS, NO_SPELL, TIRE_SPELL
from journey.validation import InvalidInputError


class TestScenarioBook:

    @pytest.fixture
    def book(self):
        return ScenarioBook()

    def test_add_uses_defaults(self, book):
        config = book.add()
        assert config.spell is NO_SPELL
        assert config.month == 6
        assert len(book) == 1

    def test_ids_unique_under_rapid_adds(self, book):
        ids = [book.add().id for _ in range(100)]
        assert len(set(ids)) == 100
        assert ids == sorted(ids)

    def test_ids_not_reused_after_remove(self, book):
        first = book.add()
        book.remove(first.id)
        assert book.add().id != first.id

    def test_update_in_place(self, book):
        config = book.add()
        updated = book.update(config.id, BOTH_SPELLS, 9)
        assert updated is config
        assert (config.spell, config.month) == (BOTH_SPELLS, 9)
        assert config.label == 'Both Spells in October'

    def test_update_rejects_bad_month(self, book):
        config = book.add(TIRE_SPELL, 7)
        with pytest.raises(InvalidInputError):
            book.update(config.id, BOTH_SPELLS, 3)
        assert (config.spell, config.month) == (TIRE_SPELL, 7)

    def test_remove_keeps_order(self, book):
        a, b, c = book.add(), book.add(TIRE_SPELL), book.add(BOTH_SPELLS)
        book.remove(b.id)
        assert [s.id for s in book] == [a.id, c.id]

    def test_unknown_id(self, book):
        with pytest.raises(KeyError):
            book.remove(99)
        with pytest.raises(KeyError):
            book.update(99, NO_SPELL, 6)
