"""Exact-match scoring for single choice questions."""

from __future__ import annotations

from typing import Any

from jobapps.grading.base import scored, zero
from jobapps.schemas import PerQuestionScore, SingleChoiceScoring


def score_single_choice(scoring: SingleChoiceScoring, answer: Any) -> PerQuestionScore:
    max_points = scoring.max_points

    if not isinstance(answer, str):
        return zero(max_points, "Invalid answer type for single choice question")

    if answer.strip() == "":
        return zero(max_points, "Empty answer provided")

    # Case-sensitive, compared as submitted.
    if answer == scoring.correct_option:
        return scored(max_points, max_points, "Matched correct option")

    return zero(max_points, f'Selected "{answer}" but correct option is "{scoring.correct_option}"')
