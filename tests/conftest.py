import os
import tempfile

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-the-suite")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="jobportal-uploads-"))

import pytest
from fastapi.testclient import TestClient

from jobportal.core.rate_limiter import rate_limiter
from jobportal.core.security import CANDIDATE, EMPLOYER, Actor
from jobportal.database import Database, get_db
from jobportal.dependencies import get_current_actor
from jobportal.main import app


@pytest.fixture
def candidate() -> Actor:
    return Actor(id="cand-1", email="cand@example.com", phone="9876543210", role=CANDIDATE)


@pytest.fixture
def employer() -> Actor:
    return Actor(id="emp-1", email="hr@acme.com", phone="9123456780", role=EMPLOYER)


def _db_override():
    yield object()


@pytest.fixture(autouse=True)
def _fresh_rate_limiter():
    rate_limiter.reset()
    yield
    rate_limiter.reset()


@pytest.fixture
def anon_client():
    app.dependency_overrides[get_db] = _db_override
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def client(candidate: Actor):
    app.dependency_overrides[get_db] = _db_override
    app.dependency_overrides[get_current_actor] = lambda: candidate
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def employer_client(employer: Actor):
    app.dependency_overrides[get_db] = _db_override
    app.dependency_overrides[get_current_actor] = lambda: employer
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def database():
    database = Database("sqlite://").open()
    database.create_all()
    yield database
    database.close()


@pytest.fixture
def db(database: Database):
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    from jobportal.config import settings

    monkeypatch.setattr(settings, "upload_dir", str(tmp_path))
    return tmp_path
