"""Repository interfaces for jobs and applications."""

from __future__ import annotations

from typing import Protocol

from jobapps.schemas import Application, Job


class JobRepository(Protocol):
    def create(self, job: Job) -> None:
        """Persist a new job."""

    def find_by_id(self, job_id: str) -> Job | None:
        """Return the job or None when it does not exist."""

    def list(self) -> list[Job]:
        """Return every job in creation order."""


class ApplicationRepository(Protocol):
    def create(self, application: Application) -> None:
        """Persist a scored application."""

    def find_by_id(self, application_id: str) -> Application | None:
        """Return the application or None when it does not exist."""

    def list_by_job_id(self, job_id: str) -> list[Application]:
        """Return the applications submitted to one job in creation order."""
