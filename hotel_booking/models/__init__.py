"""SQLAlchemy models for the hotel booking service.

All models are imported here so that ``Base.metadata.create_all`` can
discover them. If you add a new model, import it in this file.
"""

from hotel_booking.models.booking import BOOKING_STATUSES, Booking
from hotel_booking.models.customer import Customer
from hotel_booking.models.extra_service import ExtraService
from hotel_booking.models.room import ROOM_TYPES, Room

__all__ = [
    "BOOKING_STATUSES",
    "Booking",
    "Customer",
    "ExtraService",
    "ROOM_TYPES",
    "Room",
]
