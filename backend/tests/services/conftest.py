"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager patched so readiness probes see the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific behavior such as FK enforcement not exercised here)
    - raise_app_exceptions=False: catch-all 500 responses are asserted, not re-raised
"""

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.core.domain_types import UserRole
from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.models import Skill, User
import app.infrastructure.database as db_module
from app.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


async def _add(test_db, entity):
    test_db.add(entity)
    await test_db.commit()
    await test_db.refresh(entity)
    return entity


@pytest.fixture
async def seed_user(test_db):
    """A plain USER eligible for promotion."""
    return await _add(test_db, User(name="Alice", email="alice@example.com"))


@pytest.fixture
async def seed_coach_user(test_db):
    """A user already holding COACH."""
    return await _add(test_db, User(
        name="Bob", email="bob@example.com", role=UserRole.COACH.value,
    ))


@pytest.fixture
async def seed_skill(test_db):
    return await _add(test_db, Skill(name="Yoga"))


@pytest.fixture
def fetch_all(test_db):
    """Fresh (non-cached) rows of a model from the test DB."""
    async def _fetch(model, **where):
        query = select(model).execution_options(populate_existing=True)
        for column, value in where.items():
            query = query.where(getattr(model, column) == value)
        result = await test_db.execute(query)
        rows = list(result.scalars().all())
        await test_db.commit()
        return rows
    return _fetch
