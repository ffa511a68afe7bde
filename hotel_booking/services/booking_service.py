"""Booking ledger — pricing, booking lifecycle and room availability side effects.

Availability is a single flag per room. Creating a booking clears it; by
default nothing sets it again, so deleting or cancelling a booking leaves
the room unavailable. ``settings.release_room_on_booking_end`` switches on
releasing the room in both cases.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.config import settings
from hotel_booking.errors import NotFoundError, ValidationError
from hotel_booking.models.booking import Booking
from hotel_booking.models.customer import Customer
from hotel_booking.models.room import Room
from hotel_booking.schemas.booking import BookingCreate, BookingUpdate
from hotel_booking.services import room_service
from hotel_booking.services.customer_service import get_customer

logger = logging.getLogger(__name__)

_CENTS = Decimal("0.01")
_REQUIRED_UPDATE_FIELDS = ("customer_id", "room_id", "check_in_date", "check_out_date", "booking_status")


@dataclass(frozen=True)
class BookingCreated:
    """Outcome of :func:`create_booking`.

    ``room_availability_updated`` is False when the booking row was written
    but clearing the room's availability flag failed. The booking still
    counts as created; nothing compensates for the mismatch.
    """

    booking: Booking
    total_amount: Decimal
    room_availability_updated: bool


# ---------------------------------------------------------------------------
# Pricing
# ---------------------------------------------------------------------------


def calculate_nights(check_in: date | datetime, check_out: date | datetime) -> int:
    """Number of nights between two dates, rounding partial days up."""
    if isinstance(check_in, datetime) != isinstance(check_out, datetime):
        raise ValidationError("check_in and check_out must be of the same type")
    return math.ceil((check_out - check_in) / timedelta(days=1))


def calculate_total(price_per_night: Decimal, nights: int) -> Decimal:
    return (Decimal(price_per_night) * nights).quantize(_CENTS, rounding=ROUND_HALF_UP)


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


async def get_booking(db: AsyncSession, booking_id: int) -> Booking:
    """Fetch a booking or raise ``NotFoundError``."""
    result = await db.execute(select(Booking).where(Booking.id == booking_id))
    booking = result.scalar_one_or_none()
    if booking is None:
        raise NotFoundError("Booking not found")
    return booking


async def create_booking(db: AsyncSession, body: BookingCreate) -> BookingCreated:
    """Create a confirmed booking and take the room out of availability.

    Raises:
        ValidationError: check-out is not after check-in.
        NotFoundError: The room or customer does not exist.
    """
    if body.check_out_date <= body.check_in_date:
        raise ValidationError("Check-out date must be after check-in date.")

    room = await room_service.get_room(db, body.room_id)
    if room is None:
        raise NotFoundError("Room not found.")
    if await get_customer(db, body.customer_id) is None:
        raise NotFoundError("Customer not found.")

    nights = calculate_nights(body.check_in_date, body.check_out_date)
    total_amount = calculate_total(room.price_per_night, nights)

    booking = Booking(
        customer_id=body.customer_id,
        room_id=room.id,
        check_in_date=body.check_in_date,
        check_out_date=body.check_out_date,
        total_amount=total_amount,
        booking_status="confirmed",
        special_requests=body.special_requests,
    )
    db.add(booking)
    await db.flush()

    room_number = room.room_number
    availability_updated = await _take_room_out_of_availability(db, room)

    await db.refresh(booking)
    logger.info(
        "Created booking %s: room %s, %d night(s), total %s",
        booking.id,
        room_number,
        nights,
        total_amount,
    )
    return BookingCreated(
        booking=booking,
        total_amount=total_amount,
        room_availability_updated=availability_updated,
    )


async def _take_room_out_of_availability(db: AsyncSession, room: Room) -> bool:
    """Clear the room's availability flag; log and report failure instead of raising."""
    room_id = room.id
    try:
        async with db.begin_nested():
            await room_service.mark_room_unavailable(db, room)
    except SQLAlchemyError:
        logger.exception("Error updating room availability for room %s", room_id)
        return False
    return True


async def list_bookings(db: AsyncSession) -> list[dict]:
    """All bookings with customer name/email and room number/type, newest first."""
    query = (
        select(
            Booking,
            Customer.first_name,
            Customer.last_name,
            Customer.email,
            Room.room_number,
            Room.room_type,
        )
        .join(Customer, Booking.customer_id == Customer.id)
        .join(Room, Booking.room_id == Room.id)
        .order_by(Booking.created_at.desc(), Booking.id.desc())
    )
    result = await db.execute(query)

    rows = []
    for booking, first_name, last_name, email, room_number, room_type in result.all():
        rows.append(
            {
                "id": booking.id,
                "customer_id": booking.customer_id,
                "room_id": booking.room_id,
                "check_in_date": booking.check_in_date,
                "check_out_date": booking.check_out_date,
                "total_amount": booking.total_amount,
                "booking_status": booking.booking_status,
                "special_requests": booking.special_requests,
                "created_at": booking.created_at,
                "first_name": first_name,
                "last_name": last_name,
                "email": email,
                "room_number": room_number,
                "room_type": room_type,
            }
        )
    return rows


async def update_booking(db: AsyncSession, booking_id: int, body: BookingUpdate) -> Booking:
    """Replace a booking's fields.

    This is a full-row replace: ``special_requests`` takes the supplied
    value (or None), and ``total_amount`` is only changed when supplied.
    The total is never recomputed from the new dates or room. Cancelling
    releases the room the booking held before the edit.

    Raises:
        ValidationError: A required field is missing, or check-out is not
            after check-in.
        NotFoundError: The booking does not exist.
    """
    missing = [field for field in _REQUIRED_UPDATE_FIELDS if getattr(body, field) is None]
    if missing:
        raise ValidationError(f"Missing required fields for editing: {', '.join(missing)}")
    if body.check_out_date <= body.check_in_date:
        raise ValidationError("Check-out date must be after check-in date.")

    booking = await get_booking(db, booking_id)
    was_cancelled = booking.booking_status == "cancelled"
    previous_room_id = booking.room_id

    booking.customer_id = body.customer_id
    booking.room_id = body.room_id
    booking.check_in_date = body.check_in_date
    booking.check_out_date = body.check_out_date
    booking.booking_status = body.booking_status
    booking.special_requests = body.special_requests
    if body.total_amount is not None:
        booking.total_amount = body.total_amount

    await db.flush()

    if settings.release_room_on_booking_end and body.booking_status == "cancelled" and not was_cancelled:
        await room_service.release_room(db, previous_room_id)

    await db.refresh(booking)
    logger.info("Updated booking %s (status=%s)", booking.id, booking.booking_status)
    return booking


async def delete_booking(db: AsyncSession, booking_id: int) -> None:
    """Physically delete a booking together with its extra services.

    A cancelled booking no longer holds its room, so deleting it leaves the
    room as it is.

    Raises:
        NotFoundError: The booking does not exist.
    """
    booking = await get_booking(db, booking_id)
    room_id = booking.room_id
    holds_room = booking.booking_status != "cancelled"

    await db.delete(booking)
    await db.flush()

    if settings.release_room_on_booking_end and holds_room:
        await room_service.release_room(db, room_id)
    logger.info("Deleted booking %s", booking_id)
