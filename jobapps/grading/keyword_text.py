"""Keyword coverage scoring for free text questions."""

from __future__ import annotations

from typing import Any

from jobapps.grading.base import clamp_points, format_number, round_points, scored, zero
from jobapps.schemas import PerQuestionScore, TextScoring


def score_text(scoring: TextScoring, answer: Any) -> PerQuestionScore:
    """Award the share of keywords found in the answer.

    A keyword matches when its case-folded form occurs anywhere in the
    case-folded answer, so "data" is satisfied by "database". Answers whose
    match ratio falls strictly below ``minimum_match_ratio`` get nothing.
    """
    max_points = scoring.max_points

    if not isinstance(answer, str):
        return zero(max_points, "Invalid answer type for text question")

    if answer.strip() == "":
        return zero(max_points, "Empty answer provided")

    keywords = scoring.keywords
    if not keywords:
        return zero(max_points, "Invalid scoring configuration: no keywords defined")

    folded = answer.casefold()
    matched = [keyword for keyword in keywords if keyword.casefold() in folded]
    ratio = len(matched) / len(keywords)
    summary = f"Matched {len(matched)}/{len(keywords)} keywords"

    minimum = scoring.minimum_match_ratio
    if minimum is not None and ratio < minimum:
        return zero(max_points, f"{summary} but below minimum ratio {format_number(minimum)}")

    awarded = clamp_points(ratio * max_points, max_points)
    reason = f"{summary}: {', '.join(matched)}" if matched else summary
    return scored(round_points(awarded), max_points, reason)
