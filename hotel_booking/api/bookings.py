"""Bookings API router.

Thin layer over :mod:`hotel_booking.services.booking_service`; domain
errors raised there are turned into responses by the handlers in
``hotel_booking.main``.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.api.deps import get_db
from hotel_booking.schemas.booking import (
    BookingCreate,
    BookingCreatedResponse,
    BookingListItem,
    BookingMessageResponse,
    BookingUpdate,
)
from hotel_booking.services import booking_service

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


@router.post(
    "",
    response_model=BookingCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new booking",
)
async def create_booking(
    body: BookingCreate,
    db: AsyncSession = Depends(get_db),
) -> BookingCreatedResponse:
    """Create a confirmed booking, pricing it from the room's nightly rate.

    ``room_availability_updated`` is false when the booking was stored but
    the room could not be marked unavailable.
    """
    created = await booking_service.create_booking(db, body)
    return BookingCreatedResponse(
        id=created.booking.id,
        total_amount=created.total_amount,
        room_availability_updated=created.room_availability_updated,
    )


@router.get(
    "",
    response_model=list[BookingListItem],
    summary="List bookings with customer and room details",
)
async def list_bookings(db: AsyncSession = Depends(get_db)) -> list[dict]:
    """Return all bookings, most recently created first."""
    return await booking_service.list_bookings(db)


@router.put(
    "/{booking_id}",
    response_model=BookingMessageResponse,
    summary="Edit a booking",
)
async def update_booking(
    booking_id: int,
    body: BookingUpdate,
    db: AsyncSession = Depends(get_db),
) -> BookingMessageResponse:
    """Replace a booking's fields. The total is not recalculated."""
    booking = await booking_service.update_booking(db, booking_id, body)
    return BookingMessageResponse(message="Booking updated successfully", bookingId=booking.id)


@router.delete(
    "/{booking_id}",
    response_model=BookingMessageResponse,
    summary="Delete a booking",
)
async def delete_booking(
    booking_id: int,
    db: AsyncSession = Depends(get_db),
) -> BookingMessageResponse:
    """Delete a booking. The room's availability flag is left as it is by default."""
    await booking_service.delete_booking(db, booking_id)
    return BookingMessageResponse(message="Booking deleted successfully", bookingId=booking_id)
