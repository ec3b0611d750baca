"""Inclusive range scoring for numeric questions."""

from __future__ import annotations

from typing import Any

from jobapps.grading.base import format_number, is_finite_number, is_number, scored, zero
from jobapps.schemas import NumberScoring, PerQuestionScore


def score_number(scoring: NumberScoring, answer: Any) -> PerQuestionScore:
    max_points = scoring.max_points

    if not is_number(answer):
        return zero(max_points, "Invalid answer type for number question")

    if not is_finite_number(answer):
        return zero(max_points, "Answer must be a finite number")

    bounds = f"[{format_number(scoring.min)}, {format_number(scoring.max)}]"
    if scoring.min <= answer <= scoring.max:
        return scored(max_points, max_points, f"Number within range {bounds}")

    return zero(max_points, f"Number {format_number(answer)} is out of range {bounds}")
