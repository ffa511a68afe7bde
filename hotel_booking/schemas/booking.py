"""Pydantic v2 request/response schemas for booking endpoints."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class BookingCreate(BaseModel):
    """Schema for creating a new booking.

    Status is not accepted here; new bookings always start ``confirmed``.
    """

    customer_id: int
    room_id: int
    check_in_date: date
    check_out_date: date
    special_requests: str | None = None


class BookingUpdate(BaseModel):
    """Schema for replacing a booking.

    Presence of the required fields is checked by the booking service so
    that a missing field is reported by name.
    """

    customer_id: int | None = None
    room_id: int | None = None
    check_in_date: date | None = None
    check_out_date: date | None = None
    booking_status: str | None = Field(None, pattern="^(confirmed|pending|cancelled)$")
    special_requests: str | None = None
    total_amount: Decimal | None = Field(None, ge=0)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class BookingCreatedResponse(BaseModel):
    """Result of a booking creation."""

    id: int
    total_amount: Decimal
    room_availability_updated: bool
    message: str = "Booking created successfully"


class BookingListItem(BaseModel):
    """A booking joined with its customer's and room's display fields."""

    id: int
    customer_id: int
    room_id: int
    check_in_date: date
    check_out_date: date
    total_amount: Decimal
    booking_status: str
    special_requests: str | None = None
    created_at: datetime
    first_name: str
    last_name: str
    email: str
    room_number: str
    room_type: str

    model_config = ConfigDict(from_attributes=True)


class BookingMessageResponse(BaseModel):
    """Confirmation for edit/delete operations."""

    message: str
    bookingId: int  # noqa: N815
