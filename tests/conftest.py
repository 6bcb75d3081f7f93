"""
Shared fixtures: an in-memory SQLite database per test and an HTTP client
bound to the application with its session dependency overridden.
"""
from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import travel_hub.models  # noqa: F401  registers all tables on Base
from travel_hub.core.db import Base, get_db
from travel_hub.models.travel_group import GroupType
from travel_hub.schemas.travel import MemberInput, TravelGroupCreate


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def async_client(session_factory):
    from travel_hub.main import app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def group_data():
    return TravelGroupCreate(
        name="Stage Crew",
        group_type=GroupType.CREW,
        priority_level=2,
        arrival_date=date(2026, 7, 10),
        departure_date=date(2026, 7, 14),
        arrival_location="LAX",
        departure_location="JFK",
        event_id="event-1",
    )


@pytest.fixture
def crew_members():
    return [
        MemberInput(name="Ana Ruiz", email="ana@example.com", phone="555-0100", role="Rigger"),
        MemberInput(name="Ben Cole", email="ben@example.com", phone="555-0101", role="Lighting"),
        MemberInput(name="Chi Park", email="chi@example.com", phone="555-0102", role="Audio"),
    ]
