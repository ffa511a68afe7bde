"""Booking model — tracks room reservations."""

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, Enum, ForeignKey, Index, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_booking.database import Base, CreatedAtMixin

BOOKING_STATUSES = ("confirmed", "pending", "cancelled")


class Booking(CreatedAtMixin, Base):
    """A reservation linking a customer to a room for specific dates."""

    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_id: Mapped[int] = mapped_column(ForeignKey("customers.id"), nullable=False, index=True)
    room_id: Mapped[int] = mapped_column(ForeignKey("rooms.id"), nullable=False, index=True)
    check_in_date: Mapped[date] = mapped_column(Date, nullable=False)
    check_out_date: Mapped[date] = mapped_column(Date, nullable=False)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    booking_status: Mapped[str] = mapped_column(
        Enum(*BOOKING_STATUSES, name="booking_status", native_enum=False),
        default="confirmed",
        server_default="confirmed",
        index=True,
    )
    special_requests: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    customer: Mapped["Customer"] = relationship(back_populates="bookings", lazy="selectin")  # type: ignore[name-defined]  # noqa: F821
    room: Mapped["Room"] = relationship(back_populates="bookings", lazy="selectin")  # type: ignore[name-defined]  # noqa: F821
    services: Mapped[list["ExtraService"]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="booking", lazy="selectin", cascade="all, delete-orphan", passive_deletes=True
    )

    __table_args__ = (Index("ix_bookings_created_at", "created_at"),)

    def __repr__(self) -> str:
        return (
            f"<Booking(id={self.id}, room_id={self.room_id}, customer_id={self.customer_id}, "
            f"status={self.booking_status})>"
        )
