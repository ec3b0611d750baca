"""SQLModel tables backing the relational repositories."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    """Return timezone-aware UTC now timestamp."""
    return datetime.now(timezone.utc)


class JobRecord(SQLModel, table=True):
    id: str = Field(primary_key=True)
    title: str
    location: str
    customer: str
    job_name: str
    description: str
    questions_json: str
    created_at: datetime = Field(default_factory=utcnow, index=True)


class ApplicationRecord(SQLModel, table=True):
    id: str = Field(primary_key=True)
    job_id: str = Field(foreign_key="jobrecord.id", index=True)
    candidate_name: str
    candidate_email: str
    answers_json: str
    score_json: str
    total_score: float = Field(index=True)
    created_at: datetime = Field(default_factory=utcnow, index=True)
