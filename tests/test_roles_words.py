"""Role lookup and word table tests"""

import random

import pytest

from undercover.engine.roles import (
    ROLES,
    Role,
    is_infiltrator,
    role_emoji,
    role_name,
)
from undercover.engine.words import WORD_PAIRS, pick_word_pair, validate_word_pairs


class TestRoles:

    def test_every_role_has_info(self):
        assert set(ROLES) == set(Role)

    @pytest.mark.parametrize("role,name", [
        (Role.CIVILIAN, "Civilian"),
        (Role.UNDERCOVER, "Undercover"),
        (Role.MR_WHITE, "Mr. White"),
    ])
    def test_role_name(self, role, name):
        assert role_name(role) == name

    def test_role_emoji(self):
        assert role_emoji(Role.CIVILIAN) == "\U0001F9D1"
        assert role_emoji(Role.UNDERCOVER) == "\U0001F575\uFE0F"
        assert role_emoji(Role.MR_WHITE) == "\U0001F47B"

    def test_infiltrators(self):
        assert not is_infiltrator(Role.CIVILIAN)
        assert is_infiltrator(Role.UNDERCOVER)
        assert is_infiltrator(Role.MR_WHITE)


class TestWordPairs:

    def test_bundled_table_is_valid(self):
        assert validate_word_pairs(WORD_PAIRS) == list(WORD_PAIRS)
        assert len(set(WORD_PAIRS)) == len(WORD_PAIRS)

    def test_pick_returns_a_table_pair(self):
        rng = random.Random(4)
        for _ in range(100):
            civilian, undercover = pick_word_pair(rng)
            assert civilian != undercover
            assert (civilian, undercover) in WORD_PAIRS or (undercover, civilian) in WORD_PAIRS

    def test_empty_table(self):
        with pytest.raises(ValueError):
            pick_word_pair(random.Random(1), pairs=())

    def test_validate_strips_words(self):
        assert validate_word_pairs([[" Sun ", "Moon"]]) == [("Sun", "Moon")]
