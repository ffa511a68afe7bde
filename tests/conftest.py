"""Shared test configuration and fixtures.

Every test gets a fresh in-memory SQLite database (aiosqlite + StaticPool),
so no external database server is needed and tests are fully isolated.
"""

import os
import uuid
from collections.abc import AsyncGenerator
from decimal import Decimal

# Keep the application's global engine off PostgreSQL during tests.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from hotel_booking.database import configure_sqlite, get_db, init_models
from hotel_booking.main import app
from hotel_booking.models.customer import Customer
from hotel_booking.models.room import Room

_TEST_DB_URL = "sqlite+aiosqlite://"


# ---------------------------------------------------------------------------
# Per-test database
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory database with all tables."""
    engine = create_async_engine(
        _TEST_DB_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    configure_sqlite(engine)
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Yield an async session on the per-test database."""
    session = AsyncSession(bind=test_engine, expire_on_commit=False)
    try:
        yield session
    finally:
        await session.close()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient wired to use the test DB session."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Convenience fixtures: room, customer
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def test_room(db_session: AsyncSession) -> Room:
    """Create an available double room at 100.00 per night."""
    room = Room(
        room_number="101",
        room_type="double",
        price_per_night=Decimal("100.00"),
        capacity=2,
        amenities="wifi, tv",
        is_available=True,
    )
    db_session.add(room)
    await db_session.flush()
    await db_session.refresh(room)
    return room


@pytest_asyncio.fixture
async def test_customer(db_session: AsyncSession) -> Customer:
    """Create a customer with a unique email."""
    customer = Customer(
        first_name="Ada",
        last_name="Lovelace",
        email=f"guest-{uuid.uuid4().hex[:8]}@test.com",
        phone="+441234567",
        address="12 Test Street",
    )
    db_session.add(customer)
    await db_session.flush()
    await db_session.refresh(customer)
    return customer
