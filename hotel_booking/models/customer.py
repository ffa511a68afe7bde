"""Customer domain model."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_booking.database import Base, CreatedAtMixin


class Customer(CreatedAtMixin, Base):
    """Customer model — contact record created for every booking submission."""

    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)  # globally unique
    phone: Mapped[str | None] = mapped_column(String(20))
    address: Mapped[str | None] = mapped_column(Text)

    # Relationships
    bookings: Mapped[list["Booking"]] = relationship(back_populates="customer", lazy="raise")  # type: ignore[name-defined]  # noqa: F821
