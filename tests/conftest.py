"""
Shared pytest fixtures for the Smart Munic test suite.

Every test gets a fresh in-memory SQLite database and an in-process httpx
AsyncClient wired to it. Celery runs eagerly and SMS sending is disabled,
so no broker, gateway or PostgreSQL server is needed.
"""

# Standard library imports
import os

# Settings are read at import time, so the environment must be in place first
os.environ["ENVIRONMENT"] = "dev"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "true"
os.environ["SMS_ENABLED"] = "false"
os.environ["STATS_CACHE_ENABLED"] = "false"

# Third-party imports
import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Local application imports
from main import app
from smartmunic.core.db import get_async_session
from smartmunic.models import Base

VALID_PHONE = "0821234567"


@pytest_asyncio.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(bind=engine, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def db(session_factory):
    """A session for calling services directly."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    """In-process httpx AsyncClient against the test database."""

    async def override_get_async_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_get_async_session
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def issue_payload():
    def build(**overrides):
        payload = {
            "title": "Burst water pipe",
            "description": "Water flowing down Church Street since this morning",
            "category": "water_sanitation",
            "priority": "high",
            "location": "Church Street, Pretoria",
            "ward": "Ward 58",
            "latitude": "-25.7461",
            "longitude": "28.1881",
            "reporterName": "Thandi Mokoena",
            "reporterPhone": VALID_PHONE,
        }
        payload.update(overrides)
        return payload

    return build


@pytest.fixture
def technician_payload():
    def build(**overrides):
        payload = {
            "name": "Sipho Ndlovu",
            "phone": "0721234567",
            "department": "Water & Sanitation",
            "skills": ["pipe repair"],
            "currentLocation": "Hatfield",
            "latitude": "-25.7479",
            "longitude": "28.2293",
        }
        payload.update(overrides)
        return payload

    return build


@pytest_asyncio.fixture
async def create_issue(client, issue_payload):
    async def create(**overrides):
        resp = await client.post("/api/issues", json=issue_payload(**overrides))
        assert resp.status_code == 201, resp.text
        return resp.json()

    return create


@pytest_asyncio.fixture
async def create_technician(client, technician_payload):
    async def create(**overrides):
        resp = await client.post("/api/technicians", json=technician_payload(**overrides))
        assert resp.status_code == 201, resp.text
        return resp.json()

    return create
