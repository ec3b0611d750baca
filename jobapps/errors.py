"""Domain exceptions and their HTTP handlers."""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from jobapps.schemas import ErrorResponse

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Caller-correctable input problems, reported all at once."""

    def __init__(self, details: list[str]) -> None:
        super().__init__("Validation failed")
        self.details = list(details)


class NotFoundError(Exception):
    """A referenced job or application does not exist."""

    def __init__(self, resource: str, resource_id: str) -> None:
        super().__init__(f"{resource} not found")
        self.resource = resource
        self.resource_id = resource_id


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info(
        "request rejected by validation",
        extra={"path": request.url.path, "violations": len(exc.details)},
    )
    return _error_response(400, ErrorResponse(error="VALIDATION_ERROR", details=exc.details))


async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info(
        "lookup failed",
        extra={"path": request.url.path, "resource": exc.resource, "resource_id": exc.resource_id},
    )
    return _error_response(404, ErrorResponse(error="NOT_FOUND", message=str(exc)))


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unexpected error", extra={"path": request.url.path})
    return _error_response(
        500,
        ErrorResponse(error="INTERNAL_SERVER_ERROR", message="An unexpected error occurred"),
    )
