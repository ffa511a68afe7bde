"""Tests for booking endpoints."""

from decimal import Decimal

import pytest
from httpx import AsyncClient

from hotel_booking.models.customer import Customer
from hotel_booking.models.room import Room

pytestmark = pytest.mark.asyncio


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _booking_payload(
    room: Room, customer: Customer, check_in: str = "2024-01-01", check_out: str = "2024-01-03"
) -> dict:
    return {
        "customer_id": customer.id,
        "room_id": room.id,
        "check_in_date": check_in,
        "check_out_date": check_out,
        "special_requests": "Late check-in around 10pm",
    }


async def _create_booking(client: AsyncClient, room: Room, customer: Customer, **dates: str) -> dict:
    response = await client.post("/api/bookings", json=_booking_payload(room, customer, **dates))
    assert response.status_code == 201, response.text
    return response.json()


async def _room_ids(client: AsyncClient, path: str) -> list[int]:
    response = await client.get(path)
    assert response.status_code == 200
    return [room["id"] for room in response.json()]


# ---------------------------------------------------------------------------
# POST /api/bookings
# ---------------------------------------------------------------------------


class TestCreateBooking:
    """Tests for creating bookings."""

    async def test_create_prices_by_nights(
        self, client: AsyncClient, test_room: Room, test_customer: Customer
    ) -> None:
        data = await _create_booking(client, test_room, test_customer)
        assert Decimal(str(data["total_amount"])) == Decimal("200.00")
        assert data["room_availability_updated"] is True
        assert data["message"] == "Booking created successfully"
        assert isinstance(data["id"], int)

    async def test_new_booking_is_confirmed(
        self, client: AsyncClient, test_room: Room, test_customer: Customer
    ) -> None:
        created = await _create_booking(client, test_room, test_customer)
        bookings = (await client.get("/api/bookings")).json()
        booking = next(b for b in bookings if b["id"] == created["id"])
        assert booking["booking_status"] == "confirmed"
        assert booking["special_requests"] == "Late check-in around 10pm"

    async def test_create_removes_room_from_available_list(
        self, client: AsyncClient, test_room: Room, test_customer: Customer
    ) -> None:
        assert test_room.id in await _room_ids(client, "/api/rooms")

        await _create_booking(client, test_room, test_customer)

        assert test_room.id not in await _room_ids(client, "/api/rooms")
        assert test_room.id in await _room_ids(client, "/api/rooms/all")

    @pytest.mark.parametrize(
        ("check_in", "check_out"),
        [("2024-01-03", "2024-01-03"), ("2024-01-05", "2024-01-03")],
    )
    async def test_create_invalid_dates(
        self,
        client: AsyncClient,
        test_room: Room,
        test_customer: Customer,
        check_in: str,
        check_out: str,
    ) -> None:
        response = await client.post(
            "/api/bookings",
            json=_booking_payload(test_room, test_customer, check_in=check_in, check_out=check_out),
        )
        assert response.status_code == 400
        assert "check-out" in response.json()["error"].lower()

    async def test_invalid_dates_checked_before_room(
        self, client: AsyncClient, test_customer: Customer
    ) -> None:
        response = await client.post(
            "/api/bookings",
            json={
                "customer_id": test_customer.id,
                "room_id": 9999,
                "check_in_date": "2024-01-03",
                "check_out_date": "2024-01-01",
            },
        )
        assert response.status_code == 400

    async def test_create_nonexistent_room(self, client: AsyncClient, test_customer: Customer) -> None:
        response = await client.post(
            "/api/bookings",
            json={
                "customer_id": test_customer.id,
                "room_id": 9999,
                "check_in_date": "2024-01-01",
                "check_out_date": "2024-01-03",
            },
        )
        assert response.status_code == 404
        assert "room" in response.json()["error"].lower()

        bookings = await client.get("/api/bookings")
        assert bookings.json() == []

    async def test_create_nonexistent_customer(self, client: AsyncClient, test_room: Room) -> None:
        response = await client.post(
            "/api/bookings",
            json={
                "customer_id": 9999,
                "room_id": test_room.id,
                "check_in_date": "2024-01-01",
                "check_out_date": "2024-01-03",
            },
        )
        assert response.status_code == 404
        assert "customer" in response.json()["error"].lower()

    async def test_create_missing_field_is_bad_request(self, client: AsyncClient, test_room: Room) -> None:
        response = await client.post(
            "/api/bookings",
            json={"room_id": test_room.id, "check_in_date": "2024-01-01", "check_out_date": "2024-01-03"},
        )
        assert response.status_code == 400
        assert "customer_id" in response.json()["error"]

    async def test_same_room_can_be_double_booked(
        self, client: AsyncClient, test_room: Room, test_customer: Customer
    ) -> None:
        """The single availability flag is not a guard: overlapping bookings both succeed."""
        await _create_booking(client, test_room, test_customer)
        await _create_booking(client, test_room, test_customer)

        bookings = (await client.get("/api/bookings")).json()
        assert len(bookings) == 2


# ---------------------------------------------------------------------------
# GET /api/bookings
# ---------------------------------------------------------------------------


class TestListBookings:
    """Tests for listing bookings."""

    async def test_list_includes_customer_and_room_fields(
        self, client: AsyncClient, test_room: Room, test_customer: Customer
    ) -> None:
        created = await _create_booking(client, test_room, test_customer)

        response = await client.get("/api/bookings")
        assert response.status_code == 200
        (booking,) = response.json()
        assert booking["id"] == created["id"]
        assert booking["first_name"] == test_customer.first_name
        assert booking["last_name"] == test_customer.last_name
        assert booking["email"] == test_customer.email
        assert booking["room_number"] == test_room.room_number
        assert booking["room_type"] == test_room.room_type
        assert booking["check_in_date"] == "2024-01-01"
        assert booking["check_out_date"] == "2024-01-03"

    async def test_list_newest_first(
        self, client: AsyncClient, test_room: Room, test_customer: Customer
    ) -> None:
        first = await _create_booking(client, test_room, test_customer)
        second = await _create_booking(
            client, test_room, test_customer, check_in="2024-02-01", check_out="2024-02-02"
        )

        ids = [b["id"] for b in (await client.get("/api/bookings")).json()]
        assert ids == [second["id"], first["id"]]

    async def test_list_empty(self, client: AsyncClient) -> None:
        response = await client.get("/api/bookings")
        assert response.status_code == 200
        assert response.json() == []


# ---------------------------------------------------------------------------
# PUT /api/bookings/{booking_id}
# ---------------------------------------------------------------------------


class TestUpdateBooking:
    """Tests for editing a booking."""

    def _full_update(self, room: Room, customer: Customer, **overrides) -> dict:
        payload = {
            "customer_id": customer.id,
            "room_id": room.id,
            "check_in_date": "2024-03-01",
            "check_out_date": "2024-03-05",
            "booking_status": "pending",
            "special_requests": "Extra towels please",
        }
        payload.update(overrides)
        return payload

    async def test_update_replaces_fields(
        self, client: AsyncClient, test_room: Room, test_customer: Customer
    ) -> None:
        created = await _create_booking(client, test_room, test_customer)

        response = await client.put(
            f"/api/bookings/{created['id']}",
            json=self._full_update(test_room, test_customer),
        )
        assert response.status_code == 200
        assert response.json() == {"message": "Booking updated successfully", "bookingId": created["id"]}

        (booking,) = (await client.get("/api/bookings")).json()
        assert booking["booking_status"] == "pending"
        assert booking["check_in_date"] == "2024-03-01"
        assert booking["check_out_date"] == "2024-03-05"
        assert booking["special_requests"] == "Extra towels please"

    async def test_update_does_not_recompute_total(
        self, client: AsyncClient, test_room: Room, test_customer: Customer
    ) -> None:
        created = await _create_booking(client, test_room, test_customer)

        await client.put(f"/api/bookings/{created['id']}", json=self._full_update(test_room, test_customer))

        (booking,) = (await client.get("/api/bookings")).json()
        # 4 nights at 100 would be 400; the original 2-night total stays.
        assert Decimal(str(booking["total_amount"])) == Decimal("200.00")

    async def test_update_with_supplied_total(
        self, client: AsyncClient, test_room: Room, test_customer: Customer
    ) -> None:
        created = await _create_booking(client, test_room, test_customer)

        await client.put(
            f"/api/bookings/{created['id']}",
            json=self._full_update(test_room, test_customer, total_amount="350.00"),
        )

        (booking,) = (await client.get("/api/bookings")).json()
        assert Decimal(str(booking["total_amount"])) == Decimal("350.00")

    @pytest.mark.parametrize(
        "missing",
        ["customer_id", "room_id", "check_in_date", "check_out_date", "booking_status"],
    )
    async def test_update_missing_required_field(
        self,
        client: AsyncClient,
        test_room: Room,
        test_customer: Customer,
        missing: str,
    ) -> None:
        created = await _create_booking(client, test_room, test_customer)
        payload = self._full_update(test_room, test_customer)
        del payload[missing]

        response = await client.put(f"/api/bookings/{created['id']}", json=payload)
        assert response.status_code == 400
        assert missing in response.json()["error"]

        (booking,) = (await client.get("/api/bookings")).json()
        assert booking["booking_status"] == "confirmed"
        assert booking["check_in_date"] == "2024-01-01"
        assert booking["special_requests"] == "Late check-in around 10pm"

    async def test_update_invalid_status(
        self, client: AsyncClient, test_room: Room, test_customer: Customer
    ) -> None:
        created = await _create_booking(client, test_room, test_customer)
        response = await client.put(
            f"/api/bookings/{created['id']}",
            json=self._full_update(test_room, test_customer, booking_status="checked_in"),
        )
        assert response.status_code == 400

    async def test_update_unknown_room_is_storage_error(
        self, client: AsyncClient, test_room: Room, test_customer: Customer
    ) -> None:
        """Referential failures from the store come back as 500 with the raw message."""
        created = await _create_booking(client, test_room, test_customer)
        response = await client.put(
            f"/api/bookings/{created['id']}",
            json=self._full_update(test_room, test_customer, room_id=9999),
        )
        assert response.status_code == 500
        assert "foreign key" in response.json()["error"].lower()

    async def test_update_not_found(
        self, client: AsyncClient, test_room: Room, test_customer: Customer
    ) -> None:
        response = await client.put("/api/bookings/9999", json=self._full_update(test_room, test_customer))
        assert response.status_code == 404


# ---------------------------------------------------------------------------
# DELETE /api/bookings/{booking_id}
# ---------------------------------------------------------------------------


class TestDeleteBooking:
    """Tests for deleting a booking."""

    async def test_delete_success(
        self, client: AsyncClient, test_room: Room, test_customer: Customer
    ) -> None:
        created = await _create_booking(client, test_room, test_customer)

        response = await client.delete(f"/api/bookings/{created['id']}")
        assert response.status_code == 200
        assert response.json() == {"message": "Booking deleted successfully", "bookingId": created["id"]}

        assert (await client.get("/api/bookings")).json() == []

    async def test_delete_leaves_room_unavailable(
        self, client: AsyncClient, test_room: Room, test_customer: Customer
    ) -> None:
        """Deleting a booking does not give the room back."""
        created = await _create_booking(client, test_room, test_customer)

        await client.delete(f"/api/bookings/{created['id']}")

        assert test_room.id not in await _room_ids(client, "/api/rooms")

    async def test_delete_with_attached_services(
        self, client: AsyncClient, test_room: Room, test_customer: Customer
    ) -> None:
        created = await _create_booking(client, test_room, test_customer)
        service = await client.post(
            "/api/services",
            json={"booking_id": created["id"], "service_name": "Spa", "service_cost": "45.00"},
        )
        assert service.status_code == 200

        response = await client.delete(f"/api/bookings/{created['id']}")
        assert response.status_code == 200

    async def test_delete_not_found(self, client: AsyncClient) -> None:
        response = await client.delete("/api/bookings/9999")
        assert response.status_code == 404
