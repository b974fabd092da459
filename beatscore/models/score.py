"""Score record model."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Sequence

from pydantic import BaseModel, Field

from ..grading import Grade, grade
from ..mods import GameMod
from .chart import Chart, ChartIdentity, ChartSetIdentity

# Column order of the scores table; from_row/to_row rely on it
COLUMNS = (
    "timestamp",
    "chart_id",
    "chart_set_id",
    "title",
    "artist",
    "creator",
    "version",
    "count300",
    "count100",
    "count50",
    "count_geki",
    "count_katu",
    "count_miss",
    "score",
    "combo",
    "perfect",
    "mods",
)


class ScoreRecord(BaseModel):
    """One completed play."""

    timestamp: int = Field(..., description="Unix time the play finished")
    chart_id: int = 0
    chart_set_id: int = 0
    title: str
    artist: str
    creator: str
    version: str
    count300: int = Field(default=0, ge=0)
    count100: int = Field(default=0, ge=0)
    count50: int = Field(default=0, ge=0)
    count_geki: int = Field(default=0, ge=0)
    count_katu: int = Field(default=0, ge=0)
    count_miss: int = Field(default=0, ge=0)
    score: int = Field(default=0, ge=0)
    combo: int = Field(default=0, ge=0, description="Max combo")
    perfect: bool = Field(default=False, description="Full combo")
    mods: int = Field(default=0, description="GameMod bitmask")

    @classmethod
    def for_chart(cls, chart: Chart, **play: Any) -> "ScoreRecord":
        """Build a record for ``chart`` from play results."""
        return cls(**chart.model_dump(), **play)

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "ScoreRecord":
        """Build a record from a result row in table column order."""
        return cls(**dict(zip(COLUMNS, row)))

    def to_row(self) -> tuple[Any, ...]:
        """Return field values in table column order."""
        return tuple(getattr(self, column) for column in COLUMNS)

    @property
    def chart_identity(self) -> ChartIdentity:
        return ChartIdentity(
            chart_id=self.chart_id,
            title=self.title,
            artist=self.artist,
            creator=self.creator,
            version=self.version,
        )

    @property
    def chart_set_identity(self) -> ChartSetIdentity:
        return ChartSetIdentity(
            chart_set_id=self.chart_set_id,
            title=self.title,
            artist=self.artist,
            creator=self.creator,
        )

    @property
    def mod_flags(self) -> GameMod:
        return GameMod(self.mods)

    def time_string(self) -> str:
        """Format the timestamp in local time, e.g. ``3/7/2015 9:05:02 PM``."""
        try:
            played = datetime.fromtimestamp(self.timestamp)
        except (ValueError, OSError, OverflowError):
            # Outside the platform's time range; show the raw value
            return str(self.timestamp)
        hour = played.hour % 12 or 12
        return (
            f"{played.month}/{played.day}/{played.year} "
            f"{hour}:{played:%M}:{played:%S} {'AM' if played.hour < 12 else 'PM'}"
        )

    def grade(self) -> Grade:
        """Return the letter grade, or Grade.NULL if nothing was hit."""
        return grade(
            self.count300, self.count100, self.count50, self.count_miss, self.mods
        )

    def __str__(self) -> str:
        return (
            f"{self.time_string()} | ID: ({self.chart_id}, {self.chart_set_id}) | "
            f"{self.artist} - {self.title} [{self.version}] (by {self.creator}) | "
            f"Hits: ({self.count300}, {self.count100}, {self.count50}, "
            f"{self.count_geki}, {self.count_katu}, {self.count_miss}) | "
            f"Score: {self.score} ({self.combo} combo{', FC' if self.perfect else ''}) | "
            f"Mods: {self.mods}"
        )
