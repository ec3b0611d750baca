"""Application lookup endpoints."""

from fastapi import APIRouter, Depends

from jobapps.dependencies import get_applications_service
from jobapps.schemas import Application
from jobapps.services.applications import ApplicationsService

router = APIRouter(prefix="/api/v1/applications", tags=["applications"])


@router.get("/{application_id}", response_model=Application)
def get_application(
    application_id: str,
    service: ApplicationsService = Depends(get_applications_service),
) -> Application:
    return service.get_application(application_id)
