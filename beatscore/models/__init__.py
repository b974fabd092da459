"""Pydantic models for charts and scores."""

from ..mods import GameMod
from .chart import Chart, ChartIdentity, ChartSetIdentity
from .score import ScoreRecord

__all__ = [
    "Chart",
    "ChartIdentity",
    "ChartSetIdentity",
    "GameMod",
    "ScoreRecord",
]
