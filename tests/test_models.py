"""ScoreRecord model tests."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from beatscore import ChartIdentity, ChartSetIdentity, GameMod, Grade, ScoreRecord
from beatscore.models.score import COLUMNS


class TestScoreRecord:
    def test_negative_counts_rejected(self, chart):
        with pytest.raises(ValidationError):
            ScoreRecord.for_chart(chart, timestamp=1, count_miss=-1)

    def test_negative_score_rejected(self, chart):
        with pytest.raises(ValidationError):
            ScoreRecord.for_chart(chart, timestamp=1, score=-5)

    def test_row_order_matches_columns(self, make_score):
        record = make_score(1400000000, score=123, perfect=True, mods=24)
        row = record.to_row()
        assert len(row) == len(COLUMNS)
        assert row[0] == 1400000000
        assert row[COLUMNS.index("score")] == 123
        assert ScoreRecord.from_row(row) == record

    def test_identities(self, chart, make_score):
        record = make_score(1)
        assert record.chart_identity == chart.identity
        assert record.chart_set_identity == chart.set_identity
        assert isinstance(chart.identity, ChartIdentity)
        assert isinstance(chart.set_identity, ChartSetIdentity)
        assert chart.set_identity.chart_set_id == 1

    def test_time_string(self, make_score):
        record = make_score(1425762302)
        played = datetime.fromtimestamp(1425762302)
        hour = played.hour % 12 or 12
        suffix = "AM" if played.hour < 12 else "PM"
        assert record.time_string() == (
            f"{played.month}/{played.day}/{played.year} "
            f"{hour}:{played.minute:02d}:{played.second:02d} {suffix}"
        )

    def test_grade(self, make_score):
        assert make_score(1, count300=0, combo=0).grade() == Grade.NULL
        assert make_score(2, count300=300).grade() == Grade.SS

    def test_mod_flags(self, make_score):
        record = make_score(1, mods=int(GameMod.HIDDEN | GameMod.DOUBLE_TIME))
        assert GameMod.HIDDEN in record.mod_flags
        assert record.mod_flags.acronyms() == "HDDT"

    def test_str_summary(self, make_score):
        record = make_score(
            1, score=987, combo=42, perfect=True, mods=8,
            count100=2, count50=3, count_geki=4, count_katu=5, count_miss=0,
        )
        text = str(record)
        assert text.startswith(record.time_string())
        assert "ID: (75, 1)" in text
        assert "Kenji Ninuma - DISCO PRINCE [Normal] (by peppy)" in text
        assert "Hits: (100, 2, 3, 4, 5, 0)" in text
        assert "Score: 987 (42 combo, FC)" in text
        assert text.endswith("Mods: 8")

    def test_str_without_full_combo(self, make_score):
        assert "(150 combo) |" in str(make_score(1))

    def test_time_string_out_of_range(self, make_score):
        record = make_score(10**18)
        assert record.time_string() == str(10**18)
        assert str(record).startswith(f"{10**18} | ")
