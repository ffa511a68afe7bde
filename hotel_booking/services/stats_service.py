"""Dashboard statistics — independent counts over rooms, customers and bookings."""

import logging
from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.models.booking import Booking
from hotel_booking.models.customer import Customer
from hotel_booking.models.room import Room

logger = logging.getLogger(__name__)


def _count(model: type, *criteria: Any) -> Select:
    return select(func.count()).select_from(model).where(*criteria)


STAT_QUERIES: dict[str, Select] = {
    "totalRooms": _count(Room),
    "availableRooms": _count(Room, Room.is_available.is_(True)),
    "totalCustomers": _count(Customer),
    "totalBookings": _count(Booking),
    "pendingBookings": _count(Booking, Booking.booking_status == "pending"),
    "confirmedBookings": _count(Booking, Booking.booking_status == "confirmed"),
}


async def collect_statistics(db: AsyncSession) -> dict[str, Any]:
    """Run every count; a failing count becomes ``{"error": message}`` for its key.

    Each query runs in its own savepoint so that one failure does not abort
    the transaction the remaining counts use.
    """
    stats: dict[str, Any] = {}
    for key, query in STAT_QUERIES.items():
        try:
            async with db.begin_nested():
                result = await db.execute(query)
                stats[key] = result.scalar_one()
        except SQLAlchemyError as exc:
            logger.warning("Statistic %s failed: %s", key, exc)
            stats[key] = {"error": str(exc)}
    return stats
