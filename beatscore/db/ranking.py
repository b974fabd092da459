"""Rank ordering and version grouping for score lists."""

from __future__ import annotations

from typing import Iterable

from ..models import ScoreRecord


def rank_key(record: ScoreRecord) -> tuple[int, int]:
    """Sort key: higher score ranks first, then the more recent play."""
    return (record.score, record.timestamp)


def sort_by_rank(records: Iterable[ScoreRecord]) -> list[ScoreRecord]:
    """Return records best first."""
    return sorted(records, key=rank_key, reverse=True)


def partition_by_version(
    records: Iterable[ScoreRecord],
) -> list[tuple[str, list[ScoreRecord]]]:
    """Split records into runs of consecutive rows sharing a version.

    Rows of one version must be contiguous in the input, otherwise each run
    becomes its own group.
    """
    groups: list[tuple[str, list[ScoreRecord]]] = []
    for record in records:
        if not groups or groups[-1][0] != record.version:
            groups.append((record.version, []))
        groups[-1][1].append(record)
    return groups


def group_by_version(records: Iterable[ScoreRecord]) -> dict[str, list[ScoreRecord]]:
    """Map each version to its rank-ordered records.

    Records are sorted by version (descending) first, so the input order does
    not matter. Keys keep that version order.
    """
    by_version = sorted(records, key=lambda r: r.version, reverse=True)
    return {
        version: sort_by_rank(group)
        for version, group in partition_by_version(by_version)
    }
