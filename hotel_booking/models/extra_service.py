"""Extra service model — paid add-ons (room service, spa, ...) charged to a booking."""

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_booking.database import Base


class ExtraService(Base):
    """A service charged to a booking."""

    __tablename__ = "services"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    booking_id: Mapped[int] = mapped_column(
        ForeignKey("bookings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    service_name: Mapped[str] = mapped_column(String(100), nullable=False)
    service_cost: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    service_date: Mapped[date] = mapped_column(Date, default=date.today)

    booking: Mapped["Booking"] = relationship(back_populates="services", lazy="selectin")  # type: ignore[name-defined]  # noqa: F821
