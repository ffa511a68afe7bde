"""Seed the database with a sample room inventory and a few bookings.

Rooms and customers go through the same services the API uses, so the
availability flags of booked rooms end up cleared just as they would for
real bookings.

Run from the repository root:
    python -m scripts.seed_data
"""

import asyncio
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy import delete

from hotel_booking.database import async_session_factory, engine, init_models
from hotel_booking.models.booking import Booking
from hotel_booking.models.customer import Customer
from hotel_booking.models.extra_service import ExtraService
from hotel_booking.models.room import Room
from hotel_booking.schemas.booking import BookingCreate
from hotel_booking.schemas.customer import CustomerCreate
from hotel_booking.schemas.room import RoomCreate
from hotel_booking.services import booking_service, customer_service, room_service

# ---------------------------------------------------------------------------
# Seed data definitions
# ---------------------------------------------------------------------------

ROOMS = [
    {"room_number": "101", "room_type": "single", "price_per_night": Decimal("79.00"), "capacity": 1,
     "amenities": "wifi, desk, rain shower"},
    {"room_number": "102", "room_type": "single", "price_per_night": Decimal("79.00"), "capacity": 1,
     "amenities": "wifi, desk"},
    {"room_number": "201", "room_type": "double", "price_per_night": Decimal("119.00"), "capacity": 2,
     "amenities": "wifi, tv, minibar"},
    {"room_number": "202", "room_type": "double", "price_per_night": Decimal("129.00"), "capacity": 3,
     "amenities": "wifi, tv, minibar, sofa bed"},
    {"room_number": "301", "room_type": "suite", "price_per_night": Decimal("249.00"), "capacity": 4,
     "amenities": "wifi, tv, kitchenette, lounge"},
    {"room_number": "401", "room_type": "deluxe", "price_per_night": Decimal("399.00"), "capacity": 2,
     "amenities": "wifi, tv, jacuzzi, sea view, butler service"},
]

CUSTOMERS = [
    {"first_name": "Maya", "last_name": "Fernandes", "email": "maya.fernandes@example.com",
     "phone": "+351912000111", "address": "Rua Augusta 12, Lisbon"},
    {"first_name": "Jonas", "last_name": "Berg", "email": "jonas.berg@example.com",
     "phone": "+4670123456", "address": "Drottninggatan 5, Stockholm"},
    {"first_name": "Aiko", "last_name": "Tanaka", "email": "aiko.tanaka@example.com",
     "phone": "+81312345678", "address": "2-1 Marunouchi, Tokyo"},
]

# (customer index, room number, days from today, nights, special requests)
BOOKINGS = [
    (0, "201", 3, 4, "Late check-in around 11pm"),
    (1, "301", 10, 2, None),
    (2, "401", 21, 5, "Anniversary: flowers in the room"),
]


async def seed() -> None:
    """Populate the database with sample rooms, customers and bookings.

    Idempotent: existing rooms, customers, bookings and services are
    deleted first.
    """
    await init_models(engine)

    async with async_session_factory() as session:
        await session.execute(delete(ExtraService))
        await session.execute(delete(Booking))
        await session.execute(delete(Customer))
        await session.execute(delete(Room))
        await session.flush()

        rooms: dict[str, Room] = {}
        for room_data in ROOMS:
            room = await room_service.create_room(session, RoomCreate(**room_data))
            rooms[room.room_number] = room
            print(f"   🛏  Room {room.room_number} ({room.room_type}): ${room.price_per_night}/night")

        customers: list[Customer] = []
        for customer_data in CUSTOMERS:
            customers.append(await customer_service.create_customer(session, CustomerCreate(**customer_data)))
        print(f"✅ Created {len(customers)} customers")

        today = date.today()
        for customer_idx, room_number, offset, nights, requests in BOOKINGS:
            check_in = today + timedelta(days=offset)
            created = await booking_service.create_booking(
                session,
                BookingCreate(
                    customer_id=customers[customer_idx].id,
                    room_id=rooms[room_number].id,
                    check_in_date=check_in,
                    check_out_date=check_in + timedelta(days=nights),
                    special_requests=requests,
                ),
            )
            print(f"   📅 Booking {created.booking.id}: room {room_number}, {nights} nights, ${created.total_amount}")

        await session.commit()

    print("=" * 60)
    print(f"   Rooms:     {len(ROOMS)} ({len(ROOMS) - len(BOOKINGS)} available)")
    print(f"   Customers: {len(CUSTOMERS)}")
    print(f"   Bookings:  {len(BOOKINGS)}")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(seed())
