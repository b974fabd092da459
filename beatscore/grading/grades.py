"""Letter grades for finished plays."""

from __future__ import annotations

from enum import Enum

from ..mods import GameMod

# Mods that turn SS/S into their silver variants
SILVER_MODS = GameMod.HIDDEN | GameMod.FLASHLIGHT


class Grade(str, Enum):
    """Grade tiers, best first. NULL means no objects were hit or missed."""

    SSH = "SSH"
    SS = "SS"
    SH = "SH"
    S = "S"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    NULL = "NULL"


def score_percent(count300: int, count100: int, count50: int, count_miss: int) -> float:
    """Return the hit accuracy as a percentage (0-100)."""
    total = count300 + count100 + count50 + count_miss
    if total < 1:
        return 0.0
    return (count50 * 50 + count100 * 100 + count300 * 300) / (total * 300) * 100


def grade(
    count300: int,
    count100: int,
    count50: int,
    count_miss: int,
    mods: int = 0,
) -> Grade:
    """Return the grade for a set of hit counts.

    Args:
        count300: Number of 300s.
        count100: Number of 100s.
        count50: Number of 50s.
        count_miss: Number of misses.
        mods: Mod bitmask; Hidden or Flashlight award silver SS/S.

    Returns:
        The grade tier, or Grade.NULL if there are no hits at all.
    """
    total = count300 + count100 + count50 + count_miss
    if total < 1:
        return Grade.NULL

    percent = score_percent(count300, count100, count50, count_miss)
    ratio300 = count300 * 100 / total
    ratio50 = count50 * 100 / total
    no_miss = count_miss == 0
    silver = bool(GameMod(mods) & SILVER_MODS)

    if percent >= 100:
        return Grade.SSH if silver else Grade.SS
    elif ratio300 >= 90 and ratio50 < 1 and no_miss:
        return Grade.SH if silver else Grade.S
    elif (ratio300 >= 80 and no_miss) or ratio300 >= 90:
        return Grade.A
    elif (ratio300 >= 70 and no_miss) or ratio300 >= 80:
        return Grade.B
    elif ratio300 >= 60:
        return Grade.C
    else:
        return Grade.D
