"""Pydantic v2 schemas for health, database and statistics endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness information."""

    status: str
    message: str
    timestamp: datetime
    version: str


class ConnectionInfo(BaseModel):
    """Non-secret parts of the database URL."""

    host: str | None = None
    database: str | None = None
    user: str | None = None


class DatabaseStatusResponse(BaseModel):
    """Result of a storage reachability probe."""

    status: str
    message: str
    timestamp: datetime
    connection: ConnectionInfo


class TableInfo(BaseModel):
    """A table and its current row count."""

    table_name: str
    table_rows: int


class DatabaseTablesResponse(BaseModel):
    """Schema introspection result."""

    status: str
    message: str
    timestamp: datetime
    tables: list[TableInfo]


class StatsResponse(BaseModel):
    """Dashboard counts. A failed count is reported as ``{"error": ...}``."""

    status: str
    message: str
    timestamp: datetime
    statistics: dict[str, Any]
