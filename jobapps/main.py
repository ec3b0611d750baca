"""FastAPI application entrypoint."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlmodel import Session

from jobapps import db
from jobapps.errors import (
    NotFoundError,
    ValidationError,
    not_found_error_handler,
    unexpected_error_handler,
    validation_error_handler,
)
from jobapps.logging_config import configure_logging
from jobapps.routers.applications import router as applications_router
from jobapps.routers.jobs import router as jobs_router
from jobapps.settings import settings

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(ValidationError, validation_error_handler)
app.add_exception_handler(NotFoundError, not_found_error_handler)
app.add_exception_handler(Exception, unexpected_error_handler)

app.include_router(jobs_router)
app.include_router(applications_router)


@app.on_event("startup")
def on_startup() -> None:
    configure_logging(settings.log_level)
    logger.info("starting %s", settings.app_name, extra={"storage": settings.storage_mode})
    if not settings.use_in_memory:
        db.create_db_and_tables()


@app.on_event("shutdown")
def on_shutdown() -> None:
    if not settings.use_in_memory:
        db.engine.dispose()
    logger.info("shutdown complete")


@app.get("/health", tags=["meta"])
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/health/deep", tags=["meta"])
def deep_health() -> dict[str, bool | str]:
    db_ok = True
    if not settings.use_in_memory:
        try:
            with Session(db.engine) as session:
                session.exec(text("SELECT 1"))
        except Exception:
            logger.warning("database health check failed", exc_info=True)
            db_ok = False

    return {"ok": True, "storage": settings.storage_mode, "db_ok": db_ok}


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    configure_logging(settings.log_level)
    logger.info("API docs at http://%s:%s/docs", settings.host, settings.port)
    uvicorn.run("jobapps.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
