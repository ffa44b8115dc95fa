import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Settings are read at import time, so the test database must be chosen first.
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SCHEMA_MODE"] = "create"
os.environ["DATABASE_USERNAME"] = ""
os.environ["DATABASE_PASSWORD"] = ""

from tasktracker.db.session import create_all_tables, engine, session_scope  # noqa: E402
from tasktracker.main import app  # noqa: E402
from tasktracker.services.task_store import TaskStore  # noqa: E402


@pytest.fixture
def db_engine():
    SQLModel.metadata.drop_all(engine)
    create_all_tables()
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def client(db_engine):
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def store(db_engine):
    with session_scope() as s:
        yield TaskStore(s)


@pytest.fixture
def create_task(client):
    def _create(title, **fields):
        resp = client.post("/tasks", json={"title": title, **fields})
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _create
