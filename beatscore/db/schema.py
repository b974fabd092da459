"""DuckDB schema and statements for the scores table."""

from __future__ import annotations

import duckdb

# Column order is part of the file format; append new columns at the end only
CREATE_SCORES_TABLE = """
    CREATE TABLE IF NOT EXISTS scores (
        "timestamp" BIGINT PRIMARY KEY,
        chart_id INTEGER,
        chart_set_id INTEGER,
        title VARCHAR,
        artist VARCHAR,
        creator VARCHAR,
        version VARCHAR,
        count300 INTEGER,
        count100 INTEGER,
        count50 INTEGER,
        count_geki INTEGER,
        count_katu INTEGER,
        count_miss INTEGER,
        score BIGINT,
        combo INTEGER,
        perfect BOOLEAN,
        mods INTEGER
    )
"""

_SELECT_SCORES = """
    SELECT "timestamp", chart_id, chart_set_id, title, artist, creator, version,
           count300, count100, count50, count_geki, count_katu, count_miss,
           score, combo, perfect, mods
    FROM scores
"""

INSERT_SCORE = """
    INSERT INTO scores VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
"""

SELECT_CHART_SCORES = _SELECT_SCORES + """
    WHERE chart_id = ? AND title = ? AND artist = ? AND creator = ? AND version = ?
"""

SELECT_CHART_SET_SCORES = _SELECT_SCORES + """
    WHERE chart_set_id = ? AND title = ? AND artist = ? AND creator = ?
    ORDER BY version DESC
"""

SELECT_ALL_SCORES = _SELECT_SCORES + """
    ORDER BY "timestamp" ASC
"""

COUNT_SCORES = "SELECT COUNT(*) FROM scores"


def get_connection(path: str = ":memory:") -> duckdb.DuckDBPyConnection:
    """Get a DuckDB connection."""
    return duckdb.connect(path)


def create_schema(conn: duckdb.DuckDBPyConnection) -> None:
    """Create the scores table and its lookup indexes if missing."""
    conn.execute(CREATE_SCORES_TABLE)
    conn.execute(
        "CREATE INDEX IF NOT EXISTS idx_scores_chart ON scores(chart_id, version)"
    )
    conn.execute(
        "CREATE INDEX IF NOT EXISTS idx_scores_chart_set ON scores(chart_set_id)"
    )

