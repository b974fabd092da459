"""Grade derivation from hit counts."""

from .grades import Grade, grade, score_percent

__all__ = ["Grade", "grade", "score_percent"]
