"""Room inventory — listing, creation and availability transitions."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.errors import ConflictError, NotFoundError, ValidationError
from hotel_booking.models.room import ROOM_TYPES, Room
from hotel_booking.schemas.room import RoomCreate

logger = logging.getLogger(__name__)

_REQUIRED_ROOM_FIELDS = ("room_number", "room_type", "price_per_night", "capacity", "amenities")


async def list_available_rooms(db: AsyncSession) -> list[Room]:
    """Return rooms whose availability flag is set."""
    result = await db.execute(select(Room).where(Room.is_available.is_(True)).order_by(Room.id))
    return list(result.scalars().all())


async def list_all_rooms(db: AsyncSession) -> list[Room]:
    """Return every room, booked or not (edit views need the booked one too)."""
    result = await db.execute(select(Room).order_by(Room.id))
    return list(result.scalars().all())


async def get_room(db: AsyncSession, room_id: int) -> Room | None:
    result = await db.execute(select(Room).where(Room.id == room_id))
    return result.scalar_one_or_none()


async def create_room(db: AsyncSession, body: RoomCreate) -> Room:
    """Create an available room.

    Raises:
        ValidationError: A field is missing or out of range.
        ConflictError: The room number is already taken.
    """
    data = body.model_dump()
    if any(data[field] in (None, "") for field in _REQUIRED_ROOM_FIELDS):
        raise ValidationError("All fields are required")
    if data["room_type"] not in ROOM_TYPES:
        raise ValidationError(f"room_type must be one of: {', '.join(ROOM_TYPES)}")
    if data["price_per_night"] <= 0:
        raise ValidationError("price_per_night must be positive")
    if data["capacity"] < 1:
        raise ValidationError("capacity must be a positive integer")

    existing = await db.execute(select(Room.id).where(Room.room_number == data["room_number"]))
    if existing.scalar_one_or_none() is not None:
        raise ConflictError("Room number already exists")

    room = Room(is_available=True, **data)
    db.add(room)
    await db.flush()
    await db.refresh(room)
    logger.info("Created room %s (%s) id=%s", room.room_number, room.room_type, room.id)
    return room


async def mark_room_unavailable(db: AsyncSession, room: Room) -> None:
    """Clear the availability flag. Called by the booking ledger only."""
    room.is_available = False
    await db.flush()


async def release_room(db: AsyncSession, room_id: int) -> None:
    """Set the availability flag again. Called by the booking ledger only."""
    room = await get_room(db, room_id)
    if room is None:
        raise NotFoundError("Room not found.")
    room.is_available = True
    await db.flush()
    logger.info("Released room %s", room.room_number)
