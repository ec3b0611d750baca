"""SQLModel-backed repositories."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from pydantic import TypeAdapter
from sqlalchemy import Engine, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from jobapps.models import ApplicationRecord, JobRecord
from jobapps.schemas import Application, ApplicationAnswer, CandidateInfo, Job, Question, ScoreReport

logger = logging.getLogger(__name__)

_questions_adapter = TypeAdapter(list[Question])
_answers_adapter = TypeAdapter(list[ApplicationAnswer])


def _dump_models(models: list) -> str:
    return json.dumps([model.to_wire() for model in models])


class SqlJobRepository:
    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create(self, job: Job) -> None:
        row = JobRecord(
            id=job.id,
            title=job.title,
            location=job.location,
            customer=job.customer,
            job_name=job.job_name,
            description=job.description,
            questions_json=_dump_models(job.questions),
            created_at=job.created_at,
        )
        try:
            with Session(self._engine) as session:
                session.add(row)
                session.commit()
        except SQLAlchemyError:
            logger.exception("failed to insert job", extra={"job_id": job.id})
            raise
        logger.debug("job stored", extra={"job_id": job.id})

    def find_by_id(self, job_id: str) -> Job | None:
        try:
            with Session(self._engine) as session:
                row = session.get(JobRecord, job_id)
        except SQLAlchemyError:
            logger.exception("failed to load job", extra={"job_id": job_id})
            raise
        return _row_to_job(row) if row else None

    def list(self) -> list[Job]:
        try:
            with Session(self._engine) as session:
                rows = session.exec(select(JobRecord).order_by(JobRecord.created_at)).all()
        except SQLAlchemyError:
            logger.exception("failed to list jobs")
            raise
        return [_row_to_job(row) for row in rows]


class SqlApplicationRepository:
    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create(self, application: Application) -> None:
        row = ApplicationRecord(
            id=application.id,
            job_id=application.job_id,
            candidate_name=application.candidate.name,
            candidate_email=application.candidate.email,
            answers_json=_dump_models(application.answers),
            score_json=json.dumps(application.score.to_wire()),
            total_score=application.score.total,
            created_at=application.created_at,
        )
        try:
            with Session(self._engine) as session:
                session.add(row)
                session.commit()
        except SQLAlchemyError:
            logger.exception(
                "failed to insert application",
                extra={"application_id": application.id, "job_id": application.job_id},
            )
            raise
        logger.debug("application stored", extra={"application_id": application.id})

    def find_by_id(self, application_id: str) -> Application | None:
        try:
            with Session(self._engine) as session:
                row = session.get(ApplicationRecord, application_id)
        except SQLAlchemyError:
            logger.exception("failed to load application", extra={"application_id": application_id})
            raise
        return _row_to_application(row) if row else None

    def list_by_job_id(self, job_id: str) -> list[Application]:
        statement = (
            select(ApplicationRecord)
            .where(ApplicationRecord.job_id == job_id)
            .order_by(ApplicationRecord.created_at)
        )
        try:
            with Session(self._engine) as session:
                rows = session.exec(statement).all()
        except SQLAlchemyError:
            logger.exception("failed to list applications", extra={"job_id": job_id})
            raise
        return [_row_to_application(row) for row in rows]

    def delete_older_than(self, cutoff: datetime) -> int:
        """Delete applications created before ``cutoff`` and return how many went."""
        try:
            with Session(self._engine) as session:
                result = session.exec(delete(ApplicationRecord).where(ApplicationRecord.created_at < cutoff))
                session.commit()
        except SQLAlchemyError:
            logger.exception("failed to delete old applications", extra={"cutoff": cutoff.isoformat()})
            raise
        deleted = result.rowcount or 0
        logger.info("old applications deleted", extra={"count": deleted, "cutoff": cutoff.isoformat()})
        return deleted


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset on reload.
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def _row_to_job(row: JobRecord) -> Job:
    return Job(
        id=row.id,
        title=row.title,
        location=row.location,
        customer=row.customer,
        job_name=row.job_name,
        description=row.description,
        questions=_questions_adapter.validate_json(row.questions_json),
        created_at=_as_utc(row.created_at),
    )


def _row_to_application(row: ApplicationRecord) -> Application:
    return Application(
        id=row.id,
        job_id=row.job_id,
        candidate=CandidateInfo(name=row.candidate_name, email=row.candidate_email),
        answers=_answers_adapter.validate_json(row.answers_json),
        score=ScoreReport.model_validate_json(row.score_json),
        created_at=_as_utc(row.created_at),
    )
