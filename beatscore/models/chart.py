"""Chart identity models.

Charts are matched by content as well as by numeric ID, since IDs are missing
or untrusted for unsubmitted and locally made charts.
"""

from __future__ import annotations

from pydantic import BaseModel


class ChartIdentity(BaseModel):
    """Exact-match key for a single chart."""

    chart_id: int
    title: str
    artist: str
    creator: str
    version: str


class ChartSetIdentity(BaseModel):
    """Exact-match key for every version of a chart set."""

    chart_set_id: int
    title: str
    artist: str
    creator: str


class Chart(BaseModel):
    """Identity fields supplied by the chart collaborator."""

    chart_id: int = 0
    chart_set_id: int = 0
    title: str
    artist: str
    creator: str
    version: str

    @property
    def identity(self) -> ChartIdentity:
        return ChartIdentity(
            chart_id=self.chart_id,
            title=self.title,
            artist=self.artist,
            creator=self.creator,
            version=self.version,
        )

    @property
    def set_identity(self) -> ChartSetIdentity:
        return ChartSetIdentity(
            chart_set_id=self.chart_set_id,
            title=self.title,
            artist=self.artist,
            creator=self.creator,
        )
