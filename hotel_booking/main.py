"""Hotel Booking API — FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from hotel_booking.api.auth import router as auth_router
from hotel_booking.api.bookings import router as bookings_router
from hotel_booking.api.customers import router as customers_router
from hotel_booking.api.rooms import router as rooms_router
from hotel_booking.api.services import router as services_router
from hotel_booking.api.system import router as system_router
from hotel_booking.config import settings
from hotel_booking.errors import HotelBookingError, StorageError

# Configure root logger so all hotel_booking.* loggers output to stderr.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    from hotel_booking.database import engine, init_models

    # Startup
    if settings.auto_create_tables:
        await init_models(engine)
        logger.info("Database tables created/verified")
    yield
    # Shutdown: dispose engine connections
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Room inventory, customer records and booking management for a single hotel.",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Error handlers: every failure body is {"error": message}
# ---------------------------------------------------------------------------


@app.exception_handler(HotelBookingError)
async def hotel_booking_error_handler(request: Request, exc: HotelBookingError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed bodies as 400 rather than FastAPI's default 422."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "; ".join(messages) or "Invalid request"},
    )


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Pass the raw storage message through to the client."""
    logger.exception("Storage error on %s %s", request.method, request.url.path)
    error = StorageError(str(getattr(exc, "orig", None) or exc))
    return JSONResponse(status_code=error.status_code, content={"error": error.message})


# Routers
app.include_router(auth_router)
app.include_router(system_router)
app.include_router(rooms_router)
app.include_router(customers_router)
app.include_router(bookings_router)
app.include_router(services_router)


@app.get("/", tags=["root"])
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
