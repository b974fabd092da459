"""Configuration module for beatscore."""

from .loader import ConfigLoader, load_config
from .models import BeatscoreConfig, StoreSettings

__all__ = [
    "BeatscoreConfig",
    "ConfigLoader",
    "StoreSettings",
    "load_config",
]
