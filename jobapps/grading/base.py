"""Scorer interfaces and shared helpers."""

from __future__ import annotations

import math
import sys
from typing import Any, Protocol

from jobapps.schemas import PerQuestionScore


class Scorer(Protocol):
    """Maps a scoring rule and a raw answer to an itemized score."""

    def __call__(self, scoring: Any, answer: Any) -> PerQuestionScore:
        """Return the per-question score. Implementations never raise."""


def round_points(value: float) -> float:
    """Round half-up to two decimals."""
    return math.floor(value * 100 + 0.5) / 100


def clamp_points(value: float, max_points: float) -> float:
    if math.isnan(value):
        return 0.0
    return max(0.0, min(value, max_points))


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    """True for numbers that fit in a float and are neither NaN nor infinite."""
    if not is_number(value):
        return False
    if isinstance(value, int):
        return abs(value) <= sys.float_info.max
    return math.isfinite(value)


def format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def scored(awarded: float, max_points: float, reason: str) -> PerQuestionScore:
    # Question ids are filled in by the aggregate scorer.
    return PerQuestionScore(question_id="", awarded=awarded, max=max_points, reason=reason)


def zero(max_points: float, reason: str) -> PerQuestionScore:
    return scored(0, max_points, reason)
