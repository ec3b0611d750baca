"""Populate storage with a sample job and a few scored applications."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from jobapps import db  # noqa: E402
from jobapps.logging_config import configure_logging  # noqa: E402
from jobapps.repositories.memory import InMemoryApplicationRepository, InMemoryJobRepository  # noqa: E402
from jobapps.repositories.sql import SqlApplicationRepository, SqlJobRepository  # noqa: E402
from jobapps.services.applications import ApplicationsService  # noqa: E402
from jobapps.services.jobs import JobsService  # noqa: E402
from jobapps.settings import settings  # noqa: E402

SAMPLE_JOB = {
    "title": "Senior Data Engineer",
    "location": "Remote",
    "customer": "LoadUp Inc.",
    "jobName": "senior-data-engineer-remote",
    "description": "Build and maintain scalable data pipelines processing millions of records daily.",
    "questions": [
        {
            "id": "q1",
            "text": "What is your primary programming language for data engineering?",
            "type": "single_choice",
            "options": ["Python", "Scala", "Java", "Go"],
            "scoring": {"kind": "single_choice", "maxPoints": 10, "correctOption": "Python"},
        },
        {
            "id": "q2",
            "text": "Which data orchestration tools are you proficient with?",
            "type": "multi_choice",
            "options": ["Airflow", "Prefect", "Dagster", "Luigi", "Argo"],
            "scoring": {
                "kind": "multi_choice",
                "maxPoints": 15,
                "correctOptions": ["Airflow", "Prefect"],
                "penalizeExtras": True,
            },
        },
        {
            "id": "q3",
            "text": "How many years of professional data engineering experience do you have?",
            "type": "number",
            "scoring": {"kind": "number", "maxPoints": 10, "min": 5, "max": 15},
        },
        {
            "id": "q4",
            "text": "Describe your experience with data pipeline design and ETL processes.",
            "type": "text",
            "scoring": {
                "kind": "text",
                "maxPoints": 20,
                "keywords": ["ETL", "pipeline", "data warehouse", "streaming", "batch processing"],
                "minimumMatchRatio": 0.4,
            },
        },
    ],
}

SAMPLE_APPLICATIONS = [
    {
        "candidate": {"name": "Alice Johnson", "email": "alice.johnson@example.com"},
        "answers": [
            {"questionId": "q1", "answer": "Python"},
            {"questionId": "q2", "answer": ["Airflow", "Prefect"]},
            {"questionId": "q3", "answer": 8},
            {
                "questionId": "q4",
                "answer": "I design ETL pipeline stages feeding a data warehouse, mixing streaming and batch processing.",
            },
        ],
    },
    {
        "candidate": {"name": "Bob Smith", "email": "bob.smith@example.com"},
        "answers": [
            {"questionId": "q1", "answer": "Scala"},
            {"questionId": "q2", "answer": ["Airflow", "Luigi"]},
            {"questionId": "q3", "answer": 4},
            {"questionId": "q4", "answer": "Mostly ETL work on a nightly pipeline."},
        ],
    },
    {
        "candidate": {"name": "Carol Diaz", "email": "carol.diaz@example.com"},
        "answers": [
            {"questionId": "q1", "answer": "Python"},
            {"questionId": "q3", "answer": 12},
        ],
    },
]


def build_services(in_memory: bool) -> tuple[JobsService, ApplicationsService]:
    if in_memory:
        jobs_repo, applications_repo = InMemoryJobRepository(), InMemoryApplicationRepository()
    else:
        db.create_db_and_tables()
        jobs_repo, applications_repo = SqlJobRepository(db.engine), SqlApplicationRepository(db.engine)
    applications = ApplicationsService(
        applications_repo, jobs_repo, extras_penalty=settings.multi_choice_extras_penalty
    )
    return JobsService(jobs_repo), applications


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--in-memory", action="store_true", help="Seed throwaway in-memory storage")
    args = parser.parse_args(argv)

    configure_logging(settings.log_level)
    jobs, applications = build_services(args.in_memory or settings.use_in_memory)

    job = jobs.create_job(SAMPLE_JOB)
    print(f"Job: {job.id} ({job.title})")
    for payload in SAMPLE_APPLICATIONS:
        application = applications.create_application(job.id, payload)
        score = application.score
        print(f"  {application.candidate.name}: {score.total}/{score.max_total}")


if __name__ == "__main__":
    main()
