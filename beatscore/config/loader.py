"""Configuration file loader and writer.

Lookup order for the score database path:

1. ``BEATSCORE_DB_PATH`` environment variable
2. ``store.db_path`` in ``beatscore.yaml`` next to the game (project directory)
3. ``store.db_path`` in ``~/.beatscore/beatscore.yaml``
4. the ``StoreSettings`` default
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import BeatscoreConfig

logger = logging.getLogger(__name__)

DB_PATH_ENV = "BEATSCORE_DB_PATH"


class ConfigLoader:
    """Find, read and write ``beatscore.yaml``."""

    CONFIG_FILENAME = "beatscore.yaml"
    USER_CONFIG_DIR = Path.home() / ".beatscore"

    def __init__(self, project_path: Path | None = None):
        self._project_path = project_path or Path.cwd()

    def candidates(self) -> list[Path]:
        """Config files to try, highest priority first."""
        return [
            self._project_path / self.CONFIG_FILENAME,
            self.USER_CONFIG_DIR / self.CONFIG_FILENAME,
        ]

    def get_config_path(self) -> Path | None:
        return next((p for p in self.candidates() if p.exists()), None)

    def _read(self, config_path: Path) -> BeatscoreConfig | None:
        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
            return BeatscoreConfig.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable config {config_path}: {e}")
            return None

    def load(self) -> BeatscoreConfig:
        """Load configuration; defaults fill anything not found."""
        config_path = self.get_config_path()
        config = self._read(config_path) if config_path else None
        if config is None:
            config = BeatscoreConfig()
        else:
            logger.info(f"Loaded config from: {config_path}")

        env_path = os.environ.get(DB_PATH_ENV, "").strip()
        if env_path:
            logger.debug(f"{DB_PATH_ENV} overrides db_path: {env_path}")
            config.store.db_path = env_path
        return config

    def save(self, config: BeatscoreConfig, user_level: bool = False) -> Path:
        """Write ``config`` to the project (or user) config file."""
        config_path = self.candidates()[1 if user_level else 0]
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(
            yaml.safe_dump(config.model_dump(), sort_keys=False, allow_unicode=True),
            encoding="utf-8",
        )
        logger.info(f"Saved config to: {config_path}")
        return config_path


def load_config(project_path: Path | str | None = None) -> BeatscoreConfig:
    """Load configuration from project or user directory."""
    path = Path(project_path) if project_path else None
    return ConfigLoader(path).load()
