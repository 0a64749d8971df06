"""FAF validation module."""

from .validator import SCORE_WEIGHTS, calculate_score, validate

__all__ = ["SCORE_WEIGHTS", "calculate_score", "validate"]
