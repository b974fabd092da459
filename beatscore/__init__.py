"""beatscore - local score storage for rhythm-game clients."""

from .db import ScoreStore
from .errors import (
    ConstraintViolation,
    InitializationFailure,
    ScoreStoreError,
    ShutdownFailure,
    StorageFault,
)
from .grading import Grade, grade
from .models import Chart, ChartIdentity, ChartSetIdentity, GameMod, ScoreRecord

__all__ = [
    "Chart",
    "ChartIdentity",
    "ChartSetIdentity",
    "ConstraintViolation",
    "GameMod",
    "Grade",
    "InitializationFailure",
    "ScoreRecord",
    "ScoreStore",
    "ScoreStoreError",
    "ShutdownFailure",
    "StorageFault",
    "grade",
]
