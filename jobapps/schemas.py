"""Grading model plus request and response schemas."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class QuestionType(str, Enum):
    SINGLE_CHOICE = "single_choice"
    MULTI_CHOICE = "multi_choice"
    NUMBER = "number"
    TEXT = "text"


class SingleChoiceScoring(CamelModel):
    kind: Literal["single_choice"] = "single_choice"
    max_points: float
    correct_option: str


class MultiChoiceScoring(CamelModel):
    kind: Literal["multi_choice"] = "multi_choice"
    max_points: float
    correct_options: list[str]
    penalize_extras: bool = False


class NumberScoring(CamelModel):
    kind: Literal["number"] = "number"
    max_points: float
    min: float
    max: float


class TextScoring(CamelModel):
    kind: Literal["text"] = "text"
    max_points: float
    keywords: list[str]
    minimum_match_ratio: float | None = None


QuestionScoring = Annotated[
    Union[SingleChoiceScoring, MultiChoiceScoring, NumberScoring, TextScoring],
    Field(discriminator="kind"),
]

AnswerValue = Union[str, list[str], int, float]


class Question(CamelModel):
    id: str
    text: str
    type: QuestionType
    options: list[str] | None = None
    scoring: QuestionScoring


class Job(CamelModel):
    id: str
    title: str
    location: str
    customer: str
    job_name: str
    description: str
    questions: list[Question]
    created_at: datetime


class CandidateInfo(CamelModel):
    name: str
    email: str


class ApplicationAnswer(CamelModel):
    question_id: str
    answer: AnswerValue


class PerQuestionScore(CamelModel):
    question_id: str
    awarded: float
    max: float
    reason: str


class ScoreReport(CamelModel):
    total: float
    max_total: float
    per_question: list[PerQuestionScore] = Field(default_factory=list)


class Application(CamelModel):
    id: str
    job_id: str
    candidate: CandidateInfo
    answers: list[ApplicationAnswer]
    score: ScoreReport
    created_at: datetime


class ApplicationSummary(CamelModel):
    id: str
    candidate_name: str
    total_score: float
    max_total_score: float
    created_at: datetime


class ApplicationSort(str, Enum):
    SCORE_DESC = "score_desc"
    SCORE_ASC = "score_asc"


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None
    details: list[str] | None = None
