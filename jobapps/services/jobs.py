"""Job creation and lookup."""

from __future__ import annotations

import logging
import uuid
from typing import Any

from jobapps.errors import NotFoundError
from jobapps.models import utcnow
from jobapps.repositories.base import JobRepository
from jobapps.schemas import Job
from jobapps.validation import validate_job

logger = logging.getLogger(__name__)


class JobsService:
    def __init__(self, job_repository: JobRepository) -> None:
        self.job_repository = job_repository

    def create_job(self, data: Any) -> Job:
        """Validate a raw job payload, assign ids and persist it."""
        validate_job(data)

        questions = [{**question, "id": question.get("id") or str(uuid.uuid4())} for question in data["questions"]]
        job = Job.model_validate(
            {
                **data,
                "id": str(uuid.uuid4()),
                "questions": questions,
                "createdAt": utcnow(),
            }
        )

        self.job_repository.create(job)
        logger.info("job created", extra={"job_id": job.id, "questions": len(job.questions)})
        return job

    def get_job(self, job_id: str) -> Job:
        job = self.job_repository.find_by_id(job_id)
        if job is None:
            raise NotFoundError("Job", job_id)
        return job

    def list_jobs(self) -> list[Job]:
        return self.job_repository.list()
