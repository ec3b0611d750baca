"""Process-wide repository selection."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from jobapps import db
from jobapps.repositories.base import ApplicationRepository, JobRepository
from jobapps.repositories.memory import InMemoryApplicationRepository, InMemoryJobRepository
from jobapps.repositories.sql import SqlApplicationRepository, SqlJobRepository
from jobapps.settings import settings

logger = logging.getLogger(__name__)


@dataclass
class Repositories:
    jobs: JobRepository
    applications: ApplicationRepository


_repositories: Repositories | None = None


def _create_repositories() -> Repositories:
    if settings.use_in_memory:
        logger.info("using in-memory storage")
        return Repositories(jobs=InMemoryJobRepository(), applications=InMemoryApplicationRepository())

    logger.info("using SQL storage", extra={"backend": db.engine.url.get_backend_name()})
    return Repositories(jobs=SqlJobRepository(db.engine), applications=SqlApplicationRepository(db.engine))


def get_repositories() -> Repositories:
    global _repositories
    if _repositories is None:
        _repositories = _create_repositories()
    return _repositories


def reset_repositories() -> None:
    global _repositories
    _repositories = None
