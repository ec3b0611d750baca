"""Job posting endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status

from jobapps.dependencies import get_applications_service, get_jobs_service
from jobapps.schemas import Application, ApplicationSort, ApplicationSummary, Job
from jobapps.services.applications import ApplicationsService
from jobapps.services.jobs import JobsService
from jobapps.settings import settings

router = APIRouter(prefix="/api/v1/jobs", tags=["jobs"])


@router.post("", response_model=Job, status_code=status.HTTP_201_CREATED)
def create_job(payload: Any = Body(default=None), service: JobsService = Depends(get_jobs_service)) -> Job:
    return service.create_job(payload)


@router.get("", response_model=list[Job])
def list_jobs(service: JobsService = Depends(get_jobs_service)) -> list[Job]:
    return service.list_jobs()


@router.get("/{job_id}", response_model=Job)
def get_job(job_id: str, service: JobsService = Depends(get_jobs_service)) -> Job:
    return service.get_job(job_id)


@router.post("/{job_id}/applications", response_model=Application, status_code=status.HTTP_201_CREATED)
def create_application(
    job_id: str,
    payload: Any = Body(default=None),
    service: ApplicationsService = Depends(get_applications_service),
) -> Application:
    return service.create_application(job_id, payload)


@router.get("/{job_id}/applications", response_model=list[ApplicationSummary])
def list_applications(
    job_id: str,
    sort: str = Query(default=ApplicationSort.SCORE_DESC.value),
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    service: ApplicationsService = Depends(get_applications_service),
) -> list[ApplicationSummary]:
    return service.list_applications_for_job(
        job_id,
        sort=sort,
        limit=limit or settings.default_page_size,
        offset=offset,
    )
