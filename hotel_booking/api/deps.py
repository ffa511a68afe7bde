"""Shared API dependencies — single import point for all routers.

Re-exports the database session and session-token dependencies so that
router modules can import everything they need from one place::

    from hotel_booking.api.deps import get_db, get_current_session
"""

from hotel_booking.auth.session import Session, get_current_session
from hotel_booking.database import get_db

__all__ = [
    "Session",
    "get_current_session",
    "get_db",
]
