"""Dict-backed repositories for local runs and tests."""

from __future__ import annotations

from jobapps.schemas import Application, Job


class InMemoryJobRepository:
    def __init__(self) -> None:
        self._jobs: dict[str, Job] = {}

    def create(self, job: Job) -> None:
        self._jobs[job.id] = job

    def find_by_id(self, job_id: str) -> Job | None:
        return self._jobs.get(job_id)

    def list(self) -> list[Job]:
        return list(self._jobs.values())


class InMemoryApplicationRepository:
    def __init__(self) -> None:
        self._applications: dict[str, Application] = {}

    def create(self, application: Application) -> None:
        self._applications[application.id] = application

    def find_by_id(self, application_id: str) -> Application | None:
        return self._applications.get(application_id)

    def list_by_job_id(self, job_id: str) -> list[Application]:
        return [application for application in self._applications.values() if application.job_id == job_id]
