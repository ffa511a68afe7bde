"""Health, database diagnostics and dashboard statistics."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import func, inspect, select, table, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.api.deps import get_db
from hotel_booking.config import settings
from hotel_booking.schemas.system import (
    ConnectionInfo,
    DatabaseStatusResponse,
    DatabaseTablesResponse,
    HealthResponse,
    StatsResponse,
    TableInfo,
)
from hotel_booking.services.stats_service import collect_statistics

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["system"])


def _now() -> datetime:
    return datetime.now(timezone.utc)


async def _storage_failure(db: AsyncSession, message: str, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("%s: %s", message, exc)
    await db.rollback()
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "status": "ERROR",
            "message": message,
            "error": str(exc),
            "timestamp": _now().isoformat(),
        },
    )


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe. Does not touch the database."""
    return HealthResponse(
        status="OK",
        message=f"{settings.app_name} is running",
        timestamp=_now(),
        version=settings.app_version,
    )


@router.get("/database/status", response_model=DatabaseStatusResponse)
async def database_status(db: AsyncSession = Depends(get_db)) -> DatabaseStatusResponse | JSONResponse:
    """Run ``SELECT 1`` against the store and report where it lives."""
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        return await _storage_failure(db, "Database connection failed", exc)

    url = db.get_bind().url
    return DatabaseStatusResponse(
        status="OK",
        message="Database connection successful",
        timestamp=_now(),
        connection=ConnectionInfo(host=url.host, database=url.database, user=url.username),
    )


@router.get("/database/tables", response_model=DatabaseTablesResponse)
async def database_tables(db: AsyncSession = Depends(get_db)) -> DatabaseTablesResponse | JSONResponse:
    """List the tables in the store with their row counts."""
    try:
        names = await db.run_sync(lambda session: inspect(session.connection()).get_table_names())
        tables = []
        for name in sorted(names):
            result = await db.execute(select(func.count()).select_from(table(name)))
            tables.append(TableInfo(table_name=name, table_rows=result.scalar_one()))
    except SQLAlchemyError as exc:
        return await _storage_failure(db, "Failed to fetch table information", exc)

    return DatabaseTablesResponse(
        status="OK",
        message="Database tables information",
        timestamp=_now(),
        tables=tables,
    )


@router.get("/stats", response_model=StatsResponse)
async def system_statistics(db: AsyncSession = Depends(get_db)) -> StatsResponse:
    """Dashboard counts; individual failures are embedded per field."""
    return StatsResponse(
        status="OK",
        message="System statistics",
        timestamp=_now(),
        statistics=await collect_statistics(db),
    )
