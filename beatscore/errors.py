"""Error taxonomy for the score store.

Every engine error caught by the store is wrapped in one of these types, with
the original exception kept as ``__cause__``.
"""


class ScoreStoreError(Exception):
    """Base class for score store failures."""

    fatal: bool = False


class InitializationFailure(ScoreStoreError):
    """Engine unavailable, file unopenable, or schema not creatable."""

    fatal = True


class ConstraintViolation(ScoreStoreError):
    """A score with the same timestamp is already stored."""


class StorageFault(ScoreStoreError):
    """Any other read, write or query failure."""


class ShutdownFailure(ScoreStoreError):
    """The connection could not be closed cleanly."""
