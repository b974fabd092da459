"""Gameplay modifier bitmask."""

from __future__ import annotations

from enum import IntFlag


class GameMod(IntFlag):
    """Modifier bits as stored in the ``mods`` column."""

    NO_FAIL = 1
    EASY = 2
    TOUCH_DEVICE = 4
    HIDDEN = 8
    HARD_ROCK = 16
    SUDDEN_DEATH = 32
    DOUBLE_TIME = 64
    RELAX = 128
    HALF_TIME = 256
    NIGHTCORE = 512
    FLASHLIGHT = 1024
    AUTOPLAY = 2048
    SPUN_OUT = 4096
    AUTOPILOT = 8192
    PERFECT = 16384

    def acronyms(self) -> str:
        """Render the set bits as short names, e.g. ``"HDHR"``."""
        return "".join(
            acronym for mod, acronym in _ACRONYMS.items() if mod in self
        )


_ACRONYMS: dict[GameMod, str] = {
    GameMod.NO_FAIL: "NF",
    GameMod.EASY: "EZ",
    GameMod.TOUCH_DEVICE: "TD",
    GameMod.HIDDEN: "HD",
    GameMod.HARD_ROCK: "HR",
    GameMod.SUDDEN_DEATH: "SD",
    GameMod.DOUBLE_TIME: "DT",
    GameMod.RELAX: "RX",
    GameMod.HALF_TIME: "HT",
    GameMod.NIGHTCORE: "NC",
    GameMod.FLASHLIGHT: "FL",
    GameMod.AUTOPLAY: "AT",
    GameMod.SPUN_OUT: "SO",
    GameMod.AUTOPILOT: "AP",
    GameMod.PERFECT: "PF",
}
