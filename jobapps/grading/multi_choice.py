"""Partial-credit scoring for multi choice questions."""

from __future__ import annotations

from typing import Any

from jobapps.grading.base import clamp_points, round_points, scored, zero
from jobapps.schemas import MultiChoiceScoring, PerQuestionScore

DEFAULT_EXTRAS_PENALTY = 0.8


def score_multi_choice(
    scoring: MultiChoiceScoring,
    answer: Any,
    extras_penalty: float = DEFAULT_EXTRAS_PENALTY,
) -> PerQuestionScore:
    """Award points in proportion to the correct options selected.

    Matching is by set membership, so repeating a correct option does not
    count twice. Selections outside the correct set are extras; when the rule
    sets ``penalize_extras`` the proportional award is multiplied by
    ``extras_penalty``.
    """
    max_points = scoring.max_points

    if not isinstance(answer, list):
        return zero(max_points, "Invalid answer type for multi choice question")

    if not answer:
        return zero(max_points, "No options selected")

    correct = set(scoring.correct_options)
    if not correct:
        return zero(max_points, "Invalid scoring configuration: no correct options defined")

    selected_correct = {option for option in answer if isinstance(option, str) and option in correct}
    has_extras = any(not isinstance(option, str) or option not in correct for option in answer)
    matches = len(selected_correct)

    awarded = (matches / len(correct)) * max_points
    penalty_applied = has_extras and scoring.penalize_extras
    if penalty_applied:
        awarded *= extras_penalty

    awarded = clamp_points(awarded, max_points)

    reason = f"Matched {matches}/{len(correct)} correct options"
    if penalty_applied:
        reason += " (penalty applied for extra selections)"

    return scored(round_points(awarded), max_points, reason)
