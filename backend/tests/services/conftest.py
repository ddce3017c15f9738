"""Service test fixtures — async SQLite DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The customer store dependency is overridden per test (no lifespan, no real DB)
    - fake_store counts lookups so routes can assert the store was never called

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for a keyed read
    - StaticPool: every connection sees the same in-memory database
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from customer_inquiry.api.routes.customers import get_customer_store
from customer_inquiry.db.base import Base
from customer_inquiry.infrastructure.database import DatabaseSessionManager
from customer_inquiry.main import app
import customer_inquiry.models  # noqa: F401
from tests.builders import CountingStore, make_record


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
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
def test_manager(test_engine, test_session_factory):
    """DatabaseSessionManager bound to the test engine."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
def fake_store():
    """Store holding the ACME record (12345) and both boundary keys."""
    return CountingStore(
        make_record(12345),
        make_record(1, customer_name="First Customer"),
        make_record(99998, customer_name="Last But One"),
    )


@pytest.fixture
async def client(fake_store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_customer_store] = lambda: fake_store

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
