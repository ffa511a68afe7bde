"""Async SQLAlchemy engine, session factory, and declarative base."""

from collections.abc import AsyncGenerator
from datetime import datetime

from sqlalchemy import event, func
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from hotel_booking.config import settings


def configure_sqlite(engine: AsyncEngine) -> None:
    """Enable foreign keys and working SAVEPOINTs on an aiosqlite engine.

    aiosqlite emits its own BEGIN lazily, which breaks ``begin_nested()``;
    the driver's transaction handling is switched off and BEGIN is issued
    explicitly instead.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record) -> None:  # noqa: ANN001
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn) -> None:  # noqa: ANN001
        conn.exec_driver_sql("BEGIN")


def _make_engine(url: str) -> AsyncEngine:
    if make_url(url).get_backend_name() == "sqlite":
        sqlite_engine = create_async_engine(url, echo=settings.debug)
        configure_sqlite(sqlite_engine)
        return sqlite_engine
    return create_async_engine(
        url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
    )


engine = _make_engine(settings.async_database_url)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class CreatedAtMixin:
    """Mixin that adds a created_at column."""

    created_at: Mapped[datetime] = mapped_column(server_default=func.now())


async def init_models(bind: AsyncEngine = engine) -> None:
    """Create any missing tables (``CREATE TABLE IF NOT EXISTS`` semantics)."""
    import hotel_booking.models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async database session for FastAPI dependency injection.

    Usage::

        @app.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
