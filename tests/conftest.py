"""Pytest configuration and fixtures."""

import asyncio
import os
from datetime import datetime, timedelta

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

# Set test environment variables before importing app modules
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from careerpilot.core.auth import CurrentUser  # noqa: E402
from careerpilot.core.storage import get_session, init_models  # noqa: E402
from careerpilot.services.job_service import JobService  # noqa: E402
from careerpilot.services.stores import ApplicationStore, JobStore  # noqa: E402
from careerpilot.services.tracker_service import TrackerService  # noqa: E402

T0 = datetime(2026, 3, 15, 12, 0, 0)


class FakeClock:
    """Controllable replacement for utc_now."""

    def __init__(self, now: datetime = T0):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


def _database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest.fixture
def clock():
    """Clock fixed at T0 that tests can advance."""
    return FakeClock()


@pytest.fixture
def alice():
    return CurrentUser(id="user-alice")


@pytest.fixture
def bob():
    return CurrentUser(id="user-bob")


@pytest.fixture
def admin():
    return CurrentUser(id="user-admin", role="admin")


@pytest.fixture
def sample_job_fields():
    """Fields for a valid job posting."""
    return {
        "title": "Backend Engineer",
        "company": "acme",
        "location": "Remote, EU",
        "salary": "$100,000 - $120,000",
        "type": "Full-time",
        "experience": "Mid Level",
        "description": "Build and run Python services.",
        "skills": "Python, FastAPI , ,PostgreSQL",
    }


@pytest_asyncio.fixture
async def db_session(tmp_path):
    """Session bound to a throwaway SQLite database."""
    engine = create_async_engine(_database_url(tmp_path), poolclass=NullPool)
    await init_models(engine)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def job_service(db_session):
    return JobService(JobStore(db_session))


@pytest.fixture
def tracker_service(db_session, clock):
    return TrackerService(ApplicationStore(db_session), JobStore(db_session), clock=clock)


@pytest.fixture
def make_job(job_service, alice, sample_job_fields):
    """Create job postings with overridable fields."""

    async def _make_job(poster: CurrentUser | None = None, **overrides):
        fields = {**sample_job_fields, **overrides}
        return await job_service.create(poster or alice, fields)

    return _make_job


@pytest.fixture
def test_client(tmp_path):
    """TestClient with the session dependency pointed at a temp database."""
    from fastapi.testclient import TestClient

    from careerpilot.main import app

    engine = create_async_engine(_database_url(tmp_path), poolclass=NullPool)
    asyncio.run(init_models(engine))
    session_factory = async_sessionmaker(engine, expire_on_commit=False)

    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()
    asyncio.run(engine.dispose())


@pytest.fixture
def auth_headers():
    return {"X-User-Id": "user-alice"}


@pytest.fixture
def other_headers():
    return {"X-User-Id": "user-bob"}


@pytest.fixture
def job_payload(sample_job_fields):
    return dict(sample_job_fields)
