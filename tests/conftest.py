import os
import sys
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api_server import create_app
from config.settings import settings
from interviews.service import InterviewService
from storage.migrate import migrate
from storage.sqlite import InterviewDatabase

FRONTEND_RESUME = """Jane Smith
Senior frontend engineer
jane.smith@example.com | (555) 123-4567
Skills: React, TypeScript, CSS, HTML, responsive design
"""


class StepClock:
    """Deterministic clock advancing one minute per call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(minutes=1)) -> None:
        self.now = start or datetime(2026, 1, 5, 9, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + self.step
        return current


@pytest.fixture(autouse=True)
def tmp_db(monkeypatch):
    td = tempfile.TemporaryDirectory()
    db_path = os.path.join(td.name, "test.db")
    monkeypatch.setattr(settings, "DB_PATH", db_path, raising=False)
    migrate(db_path)
    try:
        yield db_path
    finally:
        td.cleanup()


@pytest.fixture
def db(tmp_db):
    database = InterviewDatabase(tmp_db).connect()
    try:
        yield database
    finally:
        database.close()


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def service(db, clock):
    return InterviewService(db, clock=clock)


@pytest.fixture
def client(tmp_db):
    app = create_app(InterviewDatabase(tmp_db))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def start_payload():
    return {
        "name": "Jane Smith",
        "email": "jane.smith@example.com",
        "phone": "(555) 123-4567",
        "jobRole": "Frontend Developer",
        "resumeText": FRONTEND_RESUME,
    }
