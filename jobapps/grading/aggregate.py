"""Whole-application scoring."""

from __future__ import annotations

from collections.abc import Sequence
from functools import partial

from jobapps.grading.base import Scorer, round_points, zero
from jobapps.grading.keyword_text import score_text
from jobapps.grading.multi_choice import DEFAULT_EXTRAS_PENALTY, score_multi_choice
from jobapps.grading.number_range import score_number
from jobapps.grading.single_choice import score_single_choice
from jobapps.schemas import ApplicationAnswer, Job, PerQuestionScore, QuestionType, ScoreReport

NO_ANSWER_REASON = "No answer provided"


def get_scorers(extras_penalty: float = DEFAULT_EXTRAS_PENALTY) -> dict[QuestionType, Scorer]:
    """Return the scorer for every question kind."""
    return {
        QuestionType.SINGLE_CHOICE: score_single_choice,
        QuestionType.MULTI_CHOICE: partial(score_multi_choice, extras_penalty=extras_penalty),
        QuestionType.NUMBER: score_number,
        QuestionType.TEXT: score_text,
    }


def _find_answer(answers: Sequence[ApplicationAnswer], question_id: str) -> ApplicationAnswer | None:
    return next((answer for answer in answers if answer.question_id == question_id), None)


def score_application(
    job: Job,
    answers: Sequence[ApplicationAnswer],
    *,
    extras_penalty: float = DEFAULT_EXTRAS_PENALTY,
) -> ScoreReport:
    """Score every question of ``job`` against the submitted answers.

    The report has one entry per question in job order. Unanswered questions
    and answers of an unexpected shape score zero with a reason; this function
    does not raise.
    """
    scorers = get_scorers(extras_penalty)
    per_question: list[PerQuestionScore] = []
    total = 0.0
    max_total = 0.0

    for question in job.questions:
        max_points = question.scoring.max_points
        submitted = _find_answer(answers, question.id)

        if submitted is None:
            entry = zero(max_points, NO_ANSWER_REASON)
        else:
            scorer = scorers.get(QuestionType(question.scoring.kind))
            if scorer is None:
                entry = zero(max_points, "Unknown question type")
            else:
                entry = scorer(question.scoring, submitted.answer)

        entry.question_id = question.id
        per_question.append(entry)
        total += entry.awarded
        max_total += entry.max

    return ScoreReport(total=round_points(total), max_total=max_total, per_question=per_question)
