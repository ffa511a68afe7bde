"""Room model — bookable hotel rooms and their availability flag."""

from decimal import Decimal

from sqlalchemy import Boolean, Enum, Integer, Numeric, String, Text, true
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_booking.database import Base, CreatedAtMixin

ROOM_TYPES = ("single", "double", "suite", "deluxe")


class Room(CreatedAtMixin, Base):
    """A hotel room. Availability is a single flag, not a date range."""

    __tablename__ = "rooms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    room_number: Mapped[str] = mapped_column(String(10), unique=True, nullable=False)
    room_type: Mapped[str] = mapped_column(
        Enum(*ROOM_TYPES, name="room_type", native_enum=False),
        nullable=False,
    )
    price_per_night: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    amenities: Mapped[str | None] = mapped_column(Text, default=None)
    is_available: Mapped[bool] = mapped_column(Boolean, default=True, server_default=true(), index=True)

    # Relationships
    bookings: Mapped[list["Booking"]] = relationship(back_populates="room", lazy="raise")  # type: ignore[name-defined]  # noqa: F821

    def __repr__(self) -> str:
        return f"<Room(id={self.id}, room_number={self.room_number!r}, available={self.is_available})>"
