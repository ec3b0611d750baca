from __future__ import annotations

import math

import pytest

from jobapps.grading.keyword_text import score_text
from jobapps.grading.multi_choice import DEFAULT_EXTRAS_PENALTY, score_multi_choice
from jobapps.grading.number_range import score_number
from jobapps.grading.single_choice import score_single_choice
from jobapps.schemas import MultiChoiceScoring, NumberScoring, SingleChoiceScoring, TextScoring


def _single(correct: str = "Python") -> SingleChoiceScoring:
    return SingleChoiceScoring(max_points=10, correct_option=correct)


def _multi(correct: list[str], penalize_extras: bool = False, max_points: float = 10) -> MultiChoiceScoring:
    return MultiChoiceScoring(max_points=max_points, correct_options=correct, penalize_extras=penalize_extras)


def _text(keywords: list[str], minimum: float | None = None) -> TextScoring:
    return TextScoring(max_points=10, keywords=keywords, minimum_match_ratio=minimum)


def test_single_choice_awards_full_points_for_exact_match() -> None:
    result = score_single_choice(_single(), "Python")

    assert result.awarded == 10
    assert result.max == 10
    assert result.reason == "Matched correct option"


def test_single_choice_is_case_sensitive() -> None:
    result = score_single_choice(_single(), "python")

    assert result.awarded == 0
    assert result.reason == 'Selected "python" but correct option is "Python"'


@pytest.mark.parametrize("answer", ["", "   ", "\t\n"])
def test_single_choice_blank_answer(answer: str) -> None:
    result = score_single_choice(_single(), answer)

    assert result.awarded == 0
    assert result.reason == "Empty answer provided"


@pytest.mark.parametrize("answer", [["Python"], 3, None, True])
def test_single_choice_rejects_non_string(answer) -> None:
    result = score_single_choice(_single(), answer)

    assert result.awarded == 0
    assert result.reason == "Invalid answer type for single choice question"


def test_single_choice_handles_special_and_unicode_options() -> None:
    assert score_single_choice(_single("C++"), "C++").awarded == 10
    assert score_single_choice(_single("Español 🇪🇸"), "Español 🇪🇸").awarded == 10


def test_multi_choice_all_correct() -> None:
    result = score_multi_choice(_multi(["A", "B"]), ["B", "A"])

    assert result.awarded == 10
    assert result.reason == "Matched 2/2 correct options"


def test_multi_choice_penalty_for_extras() -> None:
    result = score_multi_choice(_multi(["A", "B", "C"], penalize_extras=True), ["A", "B", "X"])

    assert result.awarded == 5.33
    assert "penalty applied" in result.reason
    assert result.reason.startswith("Matched 2/3")


def test_multi_choice_extras_without_penalty_flag_are_free() -> None:
    result = score_multi_choice(_multi(["A", "B", "C"]), ["A", "B", "X"])

    assert result.awarded == 6.67
    assert "penalty" not in result.reason


def test_multi_choice_everything_selected_with_penalty() -> None:
    result = score_multi_choice(_multi(["A", "B"], penalize_extras=True), ["A", "B", "C", "D", "E"])

    assert result.awarded == 8


def test_multi_choice_only_wrong_selections() -> None:
    result = score_multi_choice(_multi(["A", "B"], penalize_extras=True), ["C", "D"])

    assert result.awarded == 0
    assert result.reason.startswith("Matched 0/2")


def test_multi_choice_duplicates_do_not_inflate_matches() -> None:
    assert score_multi_choice(_multi(["A", "B"]), ["A", "A", "B", "B"]).awarded == 10

    result = score_multi_choice(_multi(["A", "B"]), ["A", "A"])
    assert result.awarded == 5
    assert result.reason == "Matched 1/2 correct options"


def test_multi_choice_partial_credit_is_proportional() -> None:
    correct = list("ABCDEFGHIJ")
    result = score_multi_choice(_multi(correct, max_points=20), ["A", "B", "C", "D", "E"])

    assert result.awarded == 10


def test_multi_choice_invalid_inputs() -> None:
    assert score_multi_choice(_multi(["A"]), "A").reason == "Invalid answer type for multi choice question"
    assert score_multi_choice(_multi(["A"]), []).reason == "No options selected"


def test_multi_choice_empty_correct_options_does_not_crash() -> None:
    result = score_multi_choice(_multi([]), ["A"])

    assert result.awarded == 0
    assert result.reason == "Invalid scoring configuration: no correct options defined"


def test_multi_choice_non_string_selections_count_as_extras() -> None:
    result = score_multi_choice(_multi(["A", "B"], penalize_extras=True), ["A", {"x": 1}, 3])

    assert result.awarded == 4
    assert "penalty applied" in result.reason


def test_multi_choice_custom_penalty_factor() -> None:
    rule = _multi(["A", "B"], penalize_extras=True)

    assert DEFAULT_EXTRAS_PENALTY == 0.8
    assert score_multi_choice(rule, ["A", "B", "Z"], extras_penalty=0.5).awarded == 5


@pytest.mark.parametrize("penalize_extras", [False, True])
def test_multi_choice_award_is_monotonic_in_matches(penalize_extras: bool) -> None:
    correct = ["A", "B", "C", "D"]
    rule = _multi(correct, penalize_extras=penalize_extras)

    awards = [score_multi_choice(rule, correct[:count]).awarded for count in range(1, len(correct) + 1)]

    assert awards == sorted(awards)
    assert awards[-1] == 10


@pytest.mark.parametrize(("answer", "awarded"), [(5, 10), (10, 10), (7.5, 10), (4.99, 0), (10.01, 0)])
def test_number_range_is_inclusive_and_binary(answer: float, awarded: float) -> None:
    result = score_number(NumberScoring(max_points=10, min=5, max=10), answer)

    assert result.awarded == awarded


def test_number_out_of_range_reason_names_value() -> None:
    result = score_number(NumberScoring(max_points=10, min=5, max=10), 15)

    assert result.awarded == 0
    assert "out of range" in result.reason
    assert "15" in result.reason
    assert result.reason == "Number 15 is out of range [5, 10]"


def test_number_within_range_reason() -> None:
    result = score_number(NumberScoring(max_points=10, min=5, max=10), 6)

    assert result.reason == "Number within range [5, 10]"


def test_number_single_point_range() -> None:
    rule = NumberScoring(max_points=4, min=3, max=3)

    assert score_number(rule, 3).awarded == 4
    assert score_number(rule, 3.0001).awarded == 0


def test_number_negative_and_fractional_bounds() -> None:
    rule = NumberScoring(max_points=10, min=-2.5, max=-1)

    assert score_number(rule, -2).awarded == 10
    assert score_number(rule, 0).reason == "Number 0 is out of range [-2.5, -1]"


@pytest.mark.parametrize("answer", [math.nan, math.inf, -math.inf, 10**400, -(10**400)])
def test_number_rejects_non_finite(answer: float) -> None:
    result = score_number(NumberScoring(max_points=10, min=0, max=10), answer)

    assert result.awarded == 0
    assert result.reason == "Answer must be a finite number"


@pytest.mark.parametrize("answer", ["5", [5], None, True])
def test_number_rejects_non_numbers(answer) -> None:
    result = score_number(NumberScoring(max_points=10, min=0, max=10), answer)

    assert result.reason == "Invalid answer type for number question"


def test_text_partial_keyword_match() -> None:
    result = score_text(_text(["ETL", "pipeline", "data", "streaming"]), "I built a database PIPELINE")

    assert result.awarded == 5
    assert result.reason == "Matched 2/4 keywords: pipeline, data"


def test_text_matching_is_case_insensitive_substring() -> None:
    rule = _text(["ETL"])

    assert score_text(rule, "etl pipeline").awarded == 10
    assert score_text(rule, "ETLETL").awarded == 10


def test_text_below_minimum_ratio_awards_nothing() -> None:
    rule = _text(["ETL", "pipeline", "data", "streaming"], minimum=0.75)

    result = score_text(rule, "I have ETL experience")

    assert result.awarded == 0
    assert "below minimum ratio" in result.reason
    assert result.reason == "Matched 1/4 keywords but below minimum ratio 0.75"


def test_text_ratio_equal_to_minimum_passes() -> None:
    rule = _text(["ETL", "pipeline"], minimum=0.5)

    assert score_text(rule, "ETL only").awarded == 5


def test_text_no_matches() -> None:
    result = score_text(_text(["kafka", "spark"]), "I like gardening")

    assert result.awarded == 0
    assert result.reason == "Matched 0/2 keywords"


def test_text_invalid_inputs() -> None:
    rule = _text(["ETL"])

    assert score_text(rule, 42).reason == "Invalid answer type for text question"
    assert score_text(rule, "   ").reason == "Empty answer provided"


def test_text_empty_keywords_does_not_crash() -> None:
    result = score_text(_text([]), "anything")

    assert result.awarded == 0
    assert result.reason == "Invalid scoring configuration: no keywords defined"


def test_text_rounds_to_two_decimals() -> None:
    result = score_text(_text(["a1", "b2", "c3"]), "a1")

    assert result.awarded == 3.33
