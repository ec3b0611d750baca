"""Delete applications older than a number of days."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import timedelta
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from jobapps import db  # noqa: E402
from jobapps.logging_config import configure_logging  # noqa: E402
from jobapps.models import utcnow  # noqa: E402
from jobapps.repositories.sql import SqlApplicationRepository  # noqa: E402
from jobapps.settings import settings  # noqa: E402

DEFAULT_DAYS = 90

logger = logging.getLogger("jobapps.scripts.clean_db")


def _positive_int(value: str) -> int:
    days = int(value)
    if days <= 0:
        raise argparse.ArgumentTypeError("days must be a positive integer")
    return days


def clean_old_applications(engine, days: int = DEFAULT_DAYS) -> int:
    cutoff = utcnow() - timedelta(days=days)
    deleted = SqlApplicationRepository(engine).delete_older_than(cutoff)
    if deleted:
        logger.info("removed %d applications older than %d days", deleted, days)
    else:
        logger.info("no applications older than %d days", days)
    return deleted


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--days",
        type=_positive_int,
        default=DEFAULT_DAYS,
        help=f"Age threshold in days (default {DEFAULT_DAYS})",
    )
    args = parser.parse_args(argv)

    configure_logging(settings.log_level)
    if settings.use_in_memory:
        logger.error("nothing to clean: in-memory storage is not persisted")
        return 1

    db.create_db_and_tables()
    deleted = clean_old_applications(db.engine, args.days)
    print(f"Deleted {deleted} applications older than {args.days} days")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
