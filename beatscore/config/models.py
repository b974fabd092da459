"""Configuration models for beatscore."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class StoreSettings(BaseModel):
    """Score store settings."""

    db_path: str = Field(default="scores.db", description="Score database file")


class BeatscoreConfig(BaseModel):
    """Root configuration model."""

    store: StoreSettings = Field(default_factory=StoreSettings)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
