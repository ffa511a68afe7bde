"""Room inventory API router."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.api.deps import get_db
from hotel_booking.models.room import Room
from hotel_booking.schemas.room import RoomCreate, RoomCreatedResponse, RoomResponse
from hotel_booking.services import room_service

router = APIRouter(prefix="/api/rooms", tags=["rooms"])


@router.get(
    "",
    response_model=list[RoomResponse],
    summary="List available rooms",
)
async def list_available_rooms(db: AsyncSession = Depends(get_db)) -> list[Room]:
    """Return rooms that can currently be booked."""
    return await room_service.list_available_rooms(db)


@router.get(
    "/all",
    response_model=list[RoomResponse],
    summary="List all rooms",
)
async def list_all_rooms(db: AsyncSession = Depends(get_db)) -> list[Room]:
    """Return every room, including booked ones (used by booking edit views)."""
    return await room_service.list_all_rooms(db)


@router.post(
    "",
    response_model=RoomCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new room",
)
async def create_room(
    body: RoomCreate,
    db: AsyncSession = Depends(get_db),
) -> RoomCreatedResponse:
    """Create a room. Returns 400 when a field is missing or the number is taken."""
    room = await room_service.create_room(db, body)
    return RoomCreatedResponse.model_validate(room)
