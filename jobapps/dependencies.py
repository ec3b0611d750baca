"""FastAPI dependencies wiring services to the configured repositories."""

from jobapps.repositories.provider import get_repositories
from jobapps.services.applications import ApplicationsService
from jobapps.services.jobs import JobsService
from jobapps.settings import settings


def get_jobs_service() -> JobsService:
    return JobsService(get_repositories().jobs)


def get_applications_service() -> ApplicationsService:
    repositories = get_repositories()
    return ApplicationsService(
        repositories.applications,
        repositories.jobs,
        extras_penalty=settings.multi_choice_extras_penalty,
    )
