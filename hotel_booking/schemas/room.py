"""Pydantic v2 request/response schemas for room endpoints."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class RoomCreate(BaseModel):
    """Schema for creating a new room.

    Fields are declared optional so that an incomplete body reaches the
    room service, which rejects it with a single "All fields are required"
    message. Values that are present must still be well-formed.
    """

    room_number: str | None = Field(None, max_length=10)
    room_type: str | None = Field(None, pattern="^(single|double|suite|deluxe)$")
    price_per_night: Decimal | None = Field(None, gt=0, max_digits=10, decimal_places=2)
    capacity: int | None = Field(None, ge=1)
    amenities: str | None = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class RoomResponse(BaseModel):
    """Room record returned from the API."""

    id: int
    room_number: str
    room_type: str
    price_per_night: Decimal
    capacity: int
    amenities: str | None = None
    is_available: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RoomCreatedResponse(RoomResponse):
    """Room record plus a confirmation message."""

    message: str = "Room created successfully"
