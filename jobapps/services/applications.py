"""Application submission, scoring and retrieval."""

from __future__ import annotations

import logging
import uuid
from typing import Any

from jobapps.errors import NotFoundError
from jobapps.grading.aggregate import score_application
from jobapps.grading.multi_choice import DEFAULT_EXTRAS_PENALTY
from jobapps.models import utcnow
from jobapps.repositories.base import ApplicationRepository, JobRepository
from jobapps.schemas import (
    Application,
    ApplicationAnswer,
    ApplicationSort,
    ApplicationSummary,
    CandidateInfo,
    Job,
)
from jobapps.validation import validate_application

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 50


class ApplicationsService:
    def __init__(
        self,
        application_repository: ApplicationRepository,
        job_repository: JobRepository,
        extras_penalty: float = DEFAULT_EXTRAS_PENALTY,
    ) -> None:
        self.application_repository = application_repository
        self.job_repository = job_repository
        self.extras_penalty = extras_penalty

    def _load_job(self, job_id: str) -> Job:
        job = self.job_repository.find_by_id(job_id)
        if job is None:
            raise NotFoundError("Job", job_id)
        return job

    def create_application(self, job_id: str, data: Any) -> Application:
        """Validate, score once and persist an application for ``job_id``."""
        job = self._load_job(job_id)
        validate_application(data, job)

        candidate = data["candidate"]
        answers = [
            ApplicationAnswer(question_id=answer["questionId"], answer=answer["answer"])
            for answer in data["answers"]
        ]
        score = score_application(job, answers, extras_penalty=self.extras_penalty)

        application = Application(
            id=str(uuid.uuid4()),
            job_id=job.id,
            candidate=CandidateInfo(name=candidate["name"], email=candidate["email"]),
            answers=answers,
            score=score,
            created_at=utcnow(),
        )
        self.application_repository.create(application)
        logger.info(
            "application created",
            extra={"application_id": application.id, "job_id": job.id, "total": score.total},
        )
        return application

    def get_application(self, application_id: str) -> Application:
        application = self.application_repository.find_by_id(application_id)
        if application is None:
            raise NotFoundError("Application", application_id)
        return application

    def list_applications_for_job(
        self,
        job_id: str,
        sort: ApplicationSort | str = ApplicationSort.SCORE_DESC,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> list[ApplicationSummary]:
        """Return summaries ranked by total score, then paginated.

        Unknown sort values fall back to highest score first. Ties keep
        submission order.
        """
        self._load_job(job_id)
        applications = self.application_repository.list_by_job_id(job_id)

        descending = sort != ApplicationSort.SCORE_ASC
        ranked = sorted(applications, key=lambda application: application.score.total, reverse=descending)
        page = ranked[offset : offset + limit]

        return [
            ApplicationSummary(
                id=application.id,
                candidate_name=application.candidate.name,
                total_score=application.score.total,
                max_total_score=application.score.max_total,
                created_at=application.created_at,
            )
            for application in page
        ]
