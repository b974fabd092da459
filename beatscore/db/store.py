"""Durable score storage backed by a single DuckDB file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import duckdb
from pydantic import ValidationError

from ..errors import (
    ConstraintViolation,
    InitializationFailure,
    ScoreStoreError,
    ShutdownFailure,
    StorageFault,
)
from ..models import ChartIdentity, ChartSetIdentity, ScoreRecord
from ..reporting import ErrorReporter, LoggingErrorReporter
from .ranking import group_by_version, sort_by_rank
from .schema import (
    COUNT_SCORES,
    INSERT_SCORE,
    SELECT_ALL_SCORES,
    SELECT_CHART_SCORES,
    SELECT_CHART_SET_SCORES,
    create_schema,
    get_connection,
)

if TYPE_CHECKING:
    from ..config import BeatscoreConfig

logger = logging.getLogger(__name__)


class ScoreStore:
    """Owns the scores table and the connection to it.

    Create one store per process and pass it to callers. Calls are blocking
    and not thread-safe; callers serialize access.
    """

    def __init__(
        self,
        path: str | Path | None = None,
        reporter: ErrorReporter | None = None,
    ):
        self._path = str(path) if path is not None else None
        self.reporter = reporter or LoggingErrorReporter()
        self._conn: duckdb.DuckDBPyConnection | None = None

    @classmethod
    def from_config(
        cls, config: BeatscoreConfig, reporter: ErrorReporter | None = None
    ) -> "ScoreStore":
        """Create a store pointed at the configured database file."""
        return cls(config.store.db_path, reporter)

    @property
    def path(self) -> str | None:
        return self._path

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def __enter__(self) -> "ScoreStore":
        if not self.is_open:
            self.initialize()
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()

    def _fail(
        self, error_type: type[ScoreStoreError], message: str, cause: Exception | None
    ) -> ScoreStoreError:
        """Wrap ``cause`` in ``error_type`` and hand it to the reporter."""
        error = error_type(message)
        error.__cause__ = cause
        self.reporter.report(message, error, error.fatal)
        return error

    def initialize(self, path: str | Path | None = None) -> None:
        """Open (or create) the score database and ensure the table exists.

        Safe to call again on an open store; existing rows are kept.

        Raises:
            InitializationFailure: The file could not be opened or the schema
                could not be created. Reported as fatal before raising.
        """
        if path is not None and str(path) != self._path:
            self.shutdown()
            self._path = str(path)
        if self._path is None:
            raise self._fail(
                InitializationFailure, "No score database path configured.", None
            )

        if self._conn is None:
            try:
                self._conn = get_connection(self._path)
            except duckdb.Error as e:
                raise self._fail(
                    InitializationFailure, "Could not connect to score database.", e
                ) from e
            logger.info(f"Opened score database: {self._path}")

        try:
            create_schema(self._conn)
        except duckdb.Error as e:
            conn, self._conn = self._conn, None
            error = self._fail(
                InitializationFailure, "Could not create score database.", e
            )
            try:
                conn.close()
            except duckdb.Error as close_error:
                logger.warning(f"Failed to close score database: {close_error}")
            raise error from e

    def add_score(self, record: ScoreRecord) -> bool:
        """Insert one score.

        Returns:
            True if the score was stored. False if it was dropped, after
            reporting a ConstraintViolation (duplicate timestamp) or a
            StorageFault.
        """
        if self._conn is None:
            self._fail(StorageFault, "Score database is not initialized.", None)
            return False

        try:
            self._conn.execute(INSERT_SCORE, list(record.to_row()))
        except duckdb.ConstraintException as e:
            self._fail(
                ConstraintViolation,
                f"A score with timestamp {record.timestamp} already exists.",
                e,
            )
            return False
        except duckdb.Error as e:
            self._fail(StorageFault, "Failed to save score to database.", e)
            return False

        logger.debug(f"Saved score: {record}")
        return True

    def _fetch(self, sql: str, params: list) -> list[ScoreRecord] | None:
        """Run a select and materialize rows; None after reporting a fault."""
        if self._conn is None:
            self._fail(StorageFault, "Score database is not initialized.", None)
            return None

        try:
            rows = self._conn.execute(sql, params).fetchall()
            return [ScoreRecord.from_row(row) for row in rows]
        except duckdb.Error as e:
            self._fail(StorageFault, "Failed to read scores from database.", e)
        except ValidationError as e:
            # NULL or negative values written by another client
            self._fail(StorageFault, "Score database contains an invalid row.", e)
        return None

    def get_chart_scores(self, identity: ChartIdentity) -> list[ScoreRecord]:
        """Get all scores for one chart, best first.

        Returns an empty list when there are none or the read failed.
        """
        records = self._fetch(
            SELECT_CHART_SCORES,
            [
                identity.chart_id,
                identity.title,
                identity.artist,
                identity.creator,
                identity.version,
            ],
        )
        return sort_by_rank(records or [])

    def get_chart_set_scores(
        self, identity: ChartSetIdentity
    ) -> dict[str, list[ScoreRecord]]:
        """Get all scores for a chart set, keyed by version.

        Each list is best first. Returns an empty dict when there are none
        or the read failed.
        """
        records = self._fetch(
            SELECT_CHART_SET_SCORES,
            [identity.chart_set_id, identity.title, identity.artist, identity.creator],
        )
        return group_by_version(records or [])

    def all_scores(self) -> list[ScoreRecord]:
        """Get every stored score, oldest first."""
        return self._fetch(SELECT_ALL_SCORES, []) or []

    def count(self) -> int:
        """Get the number of stored scores (0 if the read failed)."""
        if self._conn is None:
            self._fail(StorageFault, "Score database is not initialized.", None)
            return 0

        try:
            row = self._conn.execute(COUNT_SCORES).fetchone()
        except duckdb.Error as e:
            self._fail(StorageFault, "Failed to count scores.", e)
            return 0
        return row[0] if row else 0

    def shutdown(self) -> None:
        """Close the connection. Does nothing if the store is not open."""
        if self._conn is None:
            return

        conn, self._conn = self._conn, None
        try:
            conn.close()
        except duckdb.Error as e:
            self._fail(ShutdownFailure, "Failed to close score database.", e)
            return
        logger.info(f"Closed score database: {self._path}")
