"""Grade derivation tests."""

import pytest

from beatscore import GameMod, Grade, grade
from beatscore.grading import score_percent


class TestGrade:
    def test_no_hits_is_null(self):
        assert grade(0, 0, 0, 0) == Grade.NULL

    def test_all_300s_is_ss(self):
        assert grade(500, 0, 0, 0) == Grade.SS

    def test_silver_ss_with_hidden(self):
        assert grade(500, 0, 0, 0, GameMod.HIDDEN) == Grade.SSH

    def test_silver_s_with_flashlight(self):
        assert grade(95, 5, 0, 0, GameMod.FLASHLIGHT | GameMod.HARD_ROCK) == Grade.SH

    def test_hard_rock_alone_is_not_silver(self):
        assert grade(500, 0, 0, 0, GameMod.HARD_ROCK) == Grade.SS

    def test_s_needs_no_misses(self):
        assert grade(95, 5, 0, 0) == Grade.S
        assert grade(95, 4, 0, 1) == Grade.A

    def test_s_needs_under_one_percent_50s(self):
        assert grade(95, 4, 1, 0) == Grade.A

    @pytest.mark.parametrize(
        "counts, expected",
        [
            ((85, 15, 0, 0), Grade.A),
            ((85, 14, 0, 1), Grade.B),
            ((75, 25, 0, 0), Grade.B),
            ((75, 24, 0, 1), Grade.C),
            ((65, 35, 0, 0), Grade.C),
            ((50, 50, 0, 0), Grade.D),
            ((0, 0, 0, 10), Grade.D),
        ],
    )
    def test_tiers(self, counts, expected):
        assert grade(*counts) == expected


class TestScorePercent:
    def test_empty(self):
        assert score_percent(0, 0, 0, 0) == 0.0

    def test_mixed(self):
        # (300 + 100 + 50 + 0) / (4 * 300)
        assert score_percent(1, 1, 1, 1) == pytest.approx(37.5)


class TestGameMod:
    def test_acronyms(self):
        assert (GameMod.HIDDEN | GameMod.HARD_ROCK).acronyms() == "HDHR"

    def test_no_mods(self):
        assert GameMod(0).acronyms() == ""
