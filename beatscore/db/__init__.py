"""DuckDB data layer for score storage."""

from .ranking import group_by_version, partition_by_version, rank_key, sort_by_rank
from .schema import create_schema, get_connection
from .store import ScoreStore

__all__ = [
    "ScoreStore",
    "create_schema",
    "get_connection",
    "group_by_version",
    "partition_by_version",
    "rank_key",
    "sort_by_rank",
]
