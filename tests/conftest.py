from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _reset_repositories() -> None:
    from jobapps.repositories.provider import reset_repositories

    reset_repositories()
    yield
    reset_repositories()


@pytest.fixture
def job_payload() -> dict:
    return {
        "title": "Data Engineer",
        "location": "Remote",
        "customer": "LoadUp",
        "jobName": "data-engineer",
        "description": "Build data pipelines",
        "questions": [
            {
                "id": "q1",
                "text": "Primary language?",
                "type": "single_choice",
                "options": ["Python", "Go", "Java"],
                "scoring": {"kind": "single_choice", "maxPoints": 10, "correctOption": "Python"},
            },
            {
                "id": "q2",
                "text": "Which orchestrators have you used?",
                "type": "multi_choice",
                "options": ["Airflow", "Prefect", "Dagster", "Luigi"],
                "scoring": {
                    "kind": "multi_choice",
                    "maxPoints": 10,
                    "correctOptions": ["Airflow", "Prefect"],
                    "penalizeExtras": True,
                },
            },
            {
                "id": "q3",
                "text": "Years of experience?",
                "type": "number",
                "scoring": {"kind": "number", "maxPoints": 10, "min": 3, "max": 10},
            },
            {
                "id": "q4",
                "text": "Describe your ETL experience.",
                "type": "text",
                "scoring": {"kind": "text", "maxPoints": 10, "keywords": ["ETL", "pipeline"]},
            },
        ],
    }
