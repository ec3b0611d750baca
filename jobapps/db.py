"""Database engine helpers."""

from pathlib import Path

from sqlalchemy import Engine
from sqlmodel import SQLModel, create_engine

from jobapps import models  # noqa: F401  registers tables on SQLModel.metadata
from jobapps.settings import settings


def build_engine(url: str) -> Engine:
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


engine = build_engine(settings.database_url)


def create_db_and_tables(target: Engine | None = None) -> None:
    """Create all SQLModel tables if they do not exist."""
    target = target or engine
    if target.url.get_backend_name() == "sqlite" and target.url.database:
        Path(target.url.database).parent.mkdir(parents=True, exist_ok=True)
    SQLModel.metadata.create_all(target)
