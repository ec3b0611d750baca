"""Structural validation of job and application payloads.

Both entry points accumulate every violation into one list and raise a single
``ValidationError`` so callers can report the full problem list at once.
"""

from __future__ import annotations

import re
from typing import Any

from jobapps.errors import ValidationError
from jobapps.grading.base import is_finite_number, is_number
from jobapps.schemas import Job, Question, QuestionType

REQUIRED_JOB_FIELDS = ["title", "location", "customer", "jobName", "description"]
QUESTION_TYPES = [question_type.value for question_type in QuestionType]

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.match(email))


def validate_job(data: Any) -> None:
    """Raise ``ValidationError`` unless ``data`` is a well-formed job payload."""
    if not isinstance(data, dict):
        raise ValidationError(["Invalid request body"])

    errors: list[str] = []

    for field in REQUIRED_JOB_FIELDS:
        if not _is_non_empty_str(data.get(field)):
            errors.append(f"{field} is required")

    questions = data.get("questions")
    if not isinstance(questions, list):
        errors.append("questions must be an array")
    elif not questions:
        errors.append("questions must have at least one question")
    else:
        seen_ids: set[str] = set()
        for index, question in enumerate(questions):
            _validate_question(question, index, errors, seen_ids)

    if errors:
        raise ValidationError(errors)


def _validate_question(question: Any, index: int, errors: list[str], seen_ids: set[str]) -> None:
    prefix = f"questions[{index}]"
    if not isinstance(question, dict):
        errors.append(f"{prefix} must be an object")
        return

    if "id" in question and question["id"] is not None:
        question_id = question["id"]
        if not _is_non_empty_str(question_id):
            errors.append(f"{prefix}.id must be a non-empty string")
        elif question_id in seen_ids:
            errors.append(f'{prefix}.id "{question_id}" is used by more than one question')
        else:
            seen_ids.add(question_id)

    if not _is_non_empty_str(question.get("text")):
        errors.append(f"{prefix}.text is required")

    question_type = question.get("type")
    if question_type not in QUESTION_TYPES:
        errors.append(f"{prefix}.type must be one of: {', '.join(QUESTION_TYPES)}")
        return

    scoring = question.get("scoring")
    if not isinstance(scoring, dict):
        errors.append(f"{prefix}.scoring is required")
        return

    max_points = scoring.get("maxPoints")
    if not is_finite_number(max_points) or max_points <= 0:
        errors.append(f"{prefix}.scoring.maxPoints must be a positive finite number")

    if scoring.get("kind") != question_type:
        errors.append(f"{prefix}.scoring.kind must match question type")

    options = question.get("options")
    options_valid = _is_string_list(options) and len(options) > 0

    if question_type == QuestionType.SINGLE_CHOICE.value:
        if not options_valid:
            errors.append(f"{prefix}.options is required for single_choice and must have at least one option")
        correct_option = scoring.get("correctOption")
        if not _is_non_empty_str(correct_option):
            errors.append(f"{prefix}.scoring.correctOption is required for single_choice")
        elif options_valid and correct_option not in options:
            errors.append(f"{prefix}.scoring.correctOption must be one of the provided options")

    elif question_type == QuestionType.MULTI_CHOICE.value:
        if not options_valid:
            errors.append(f"{prefix}.options is required for multi_choice and must have at least one option")
        correct_options = scoring.get("correctOptions")
        if not _is_string_list(correct_options) or not correct_options:
            errors.append(
                f"{prefix}.scoring.correctOptions is required for multi_choice and must have at least one option"
            )
        elif options_valid:
            invalid = [option for option in correct_options if option not in options]
            if invalid:
                errors.append(f"{prefix}.scoring.correctOptions contains invalid options: {', '.join(invalid)}")
        penalize_extras = scoring.get("penalizeExtras")
        if penalize_extras is not None and not isinstance(penalize_extras, bool):
            errors.append(f"{prefix}.scoring.penalizeExtras must be a boolean")

    else:
        if options is not None and not options_valid:
            errors.append(f"{prefix}.options must be a non-empty array of strings when provided")

        if question_type == QuestionType.NUMBER.value:
            _validate_number_scoring(scoring, prefix, errors)
        else:
            _validate_text_scoring(scoring, prefix, errors)


def _validate_number_scoring(scoring: dict[str, Any], prefix: str, errors: list[str]) -> None:
    if "min" not in scoring or "max" not in scoring:
        errors.append(f"{prefix}.scoring.min and max are required for number")
        return

    low, high = scoring["min"], scoring["max"]
    if not is_finite_number(low) or not is_finite_number(high):
        errors.append(f"{prefix}.scoring.min and max must be finite numbers")
    elif low > high:
        errors.append(f"{prefix}.scoring.min must be less than or equal to max")


def _validate_text_scoring(scoring: dict[str, Any], prefix: str, errors: list[str]) -> None:
    keywords = scoring.get("keywords")
    if not isinstance(keywords, list) or not keywords:
        errors.append(f"{prefix}.scoring.keywords is required for text and must have at least one keyword")
    elif not all(_is_non_empty_str(keyword) for keyword in keywords):
        errors.append(f"{prefix}.scoring.keywords must be non-empty strings")

    ratio = scoring.get("minimumMatchRatio")
    if ratio is not None and (not is_finite_number(ratio) or ratio < 0 or ratio > 1):
        errors.append(f"{prefix}.scoring.minimumMatchRatio must be between 0 and 1")


def validate_application(data: Any, job: Job) -> None:
    """Raise ``ValidationError`` unless ``data`` is a well-formed application for ``job``.

    Questions left unanswered are fine; they score zero later.
    """
    if not isinstance(data, dict):
        raise ValidationError(["Invalid request body"])

    errors: list[str] = []

    candidate = data.get("candidate")
    if not isinstance(candidate, dict):
        errors.append("candidate is required")
    else:
        if not _is_non_empty_str(candidate.get("name")):
            errors.append("candidate.name is required")
        email = candidate.get("email")
        if not _is_non_empty_str(email):
            errors.append("candidate.email is required")
        elif not is_valid_email(email):
            errors.append("candidate.email must be a valid email address")

    answers = data.get("answers")
    if not isinstance(answers, list):
        errors.append("answers must be an array")
    else:
        questions = {question.id: question for question in job.questions}
        for index, answer in enumerate(answers):
            prefix = f"answers[{index}]"
            if not isinstance(answer, dict):
                errors.append(f"{prefix} must be an object")
                continue

            question_id = answer.get("questionId")
            if not _is_non_empty_str(question_id):
                errors.append(f"{prefix}.questionId is required")
                continue

            question = questions.get(question_id)
            if question is None:
                errors.append(f'{prefix}.questionId "{question_id}" does not exist in this job')
                continue

            _validate_answer_value(answer.get("answer"), question, prefix, errors)

    if errors:
        raise ValidationError(errors)


def _validate_answer_value(value: Any, question: Question, prefix: str, errors: list[str]) -> None:
    if question.type == QuestionType.SINGLE_CHOICE:
        if not isinstance(value, str):
            errors.append(f"{prefix}.answer must be a string for single_choice question")

    elif question.type == QuestionType.MULTI_CHOICE:
        if not isinstance(value, list):
            errors.append(f"{prefix}.answer must be an array for multi_choice question")
        elif not value:
            errors.append(f"{prefix}.answer must have at least one selection for multi_choice question")
        elif not _is_string_list(value):
            errors.append(f"{prefix}.answer must be an array of strings for multi_choice question")

    elif question.type == QuestionType.NUMBER:
        if not is_number(value):
            errors.append(f"{prefix}.answer must be a number for number question")
        elif not is_finite_number(value):
            errors.append(f"{prefix}.answer must be a finite number (not NaN or Infinity)")

    elif question.type == QuestionType.TEXT:
        if not isinstance(value, str):
            errors.append(f"{prefix}.answer must be a string for text question")
