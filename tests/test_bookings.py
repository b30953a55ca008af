from datetime import datetime

import pytest

from app.domain.bookings.status import can_transition
from app.models import BookingStatus, PetType, UserRole


def booking_body(owner, sitter, pets=(), start="2030-03-01T09:00:00", end="2030-03-01T13:00:00"):
    return {
        "ownerId": owner.id,
        "sitterId": sitter.id,
        "startDate": start,
        "endDate": end,
        "totalAmount": 80,
        "petIds": [pet.id for pet in pets],
    }


class TestStatusMachine:
    @pytest.mark.parametrize("terminal", [BookingStatus.COMPLETED, BookingStatus.CANCELLED])
    def test_terminal_statuses_are_final(self, terminal):
        for status in BookingStatus:
            assert can_transition(terminal, status) == (status == terminal)

    def test_open_statuses_can_move_anywhere(self):
        for status in BookingStatus:
            assert can_transition(BookingStatus.PENDING, status)
            assert can_transition(BookingStatus.IN_PROGRESS, status)


class TestCreateBooking:
    def test_creates_pending_booking_and_notifies_sitter(
        self, client, owner, sitter, make_pet, transport, metrics
    ):
        pet = make_pet(owner)

        response = client.post("/bookings", json=booking_body(owner, sitter, [pet]))

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "PENDING"
        assert data["sitter"]["id"] == sitter.id
        assert [p["id"] for p in data["pets"]] == [pet.id]
        assert data["hourlyRate"] == 20.0
        assert transport.delivered == [(sitter.id, "BOOKING_CONFIRMED")]
        assert metrics.bookings_created == 1

    def test_timezone_aware_dates_are_stored_as_utc(self, client, owner, sitter):
        body = booking_body(
            owner, sitter, start="2030-03-01T09:00:00+02:00", end="2030-03-01T13:00:00+02:00"
        )
        data = client.post("/bookings", json=body).json()
        assert data["startDate"].startswith("2030-03-01T07:00:00")

    def test_owner_and_sitter_roles_are_checked(self, client, owner, sitter):
        response = client.post("/bookings", json=booking_body(sitter, sitter))
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid owner"

        response = client.post("/bookings", json=booking_body(owner, owner))
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid sitter"

    def test_end_must_follow_start(self, client, owner, sitter):
        body = booking_body(owner, sitter, start="2030-03-01T13:00:00", end="2030-03-01T09:00:00")
        response = client.post("/bookings", json=body)
        assert response.status_code == 400
        assert response.json()["detail"] == "End date must be after start date"

    def test_pets_must_belong_to_owner(self, client, owner, sitter, make_user, make_pet):
        stranger_pet = make_pet(make_user(UserRole.OWNER), PetType.CAT)

        response = client.post("/bookings", json=booking_body(owner, sitter, [stranger_pet]))

        assert response.status_code == 400
        assert "doesn't belong to owner" in response.json()["detail"]

    def test_overlapping_booking_for_sitter_rejected(self, client, owner, sitter):
        assert client.post("/bookings", json=booking_body(owner, sitter)).status_code == 201

        overlapping = booking_body(
            owner, sitter, start="2030-03-01T12:00:00", end="2030-03-01T15:00:00"
        )
        response = client.post("/bookings", json=overlapping)

        assert response.status_code == 400
        assert response.json()["detail"] == "Sitter is not available for the selected time"

    def test_cancelled_booking_frees_the_slot(self, client, owner, sitter, make_booking):
        make_booking(owner, sitter, BookingStatus.CANCELLED, start=datetime(2030, 3, 1, 9, 0))
        assert client.post("/bookings", json=booking_body(owner, sitter)).status_code == 201


class TestBookingStatus:
    def test_confirm_notifies_owner(self, client, owner, sitter, make_booking, transport, metrics):
        booking = make_booking(owner, sitter)

        response = client.patch(f"/bookings/{booking.id}/status", json={"status": "CONFIRMED"})

        assert response.status_code == 200
        assert response.json()["status"] == "CONFIRMED"
        assert transport.delivered == [(owner.id, "BOOKING_CONFIRMED")]
        assert metrics.booking_transitions["CONFIRMED"] == 1

    @pytest.mark.parametrize("terminal", [BookingStatus.COMPLETED, BookingStatus.CANCELLED])
    def test_terminal_booking_cannot_change(self, client, owner, sitter, make_booking, terminal):
        booking = make_booking(owner, sitter, terminal)

        response = client.patch(f"/bookings/{booking.id}/status", json={"status": "PENDING"})

        assert response.status_code == 400
        assert response.json()["detail"] == (
            f"Cannot change booking status from {terminal.value} to PENDING"
        )

    def test_same_status_is_a_no_op(self, client, owner, sitter, make_booking, metrics):
        booking = make_booking(owner, sitter, BookingStatus.COMPLETED)

        response = client.patch(f"/bookings/{booking.id}/status", json={"status": "COMPLETED"})

        assert response.status_code == 200
        assert metrics.booking_transitions == {}

    def test_update_through_put_is_also_guarded(self, client, owner, sitter, make_booking):
        booking = make_booking(owner, sitter, BookingStatus.CANCELLED)
        response = client.put(f"/bookings/{booking.id}", json={"status": "CONFIRMED"})
        assert response.status_code == 400

    def test_unknown_status_is_validation_error(self, client, owner, sitter, make_booking):
        booking = make_booking(owner, sitter)
        response = client.patch(f"/bookings/{booking.id}/status", json={"status": "ARCHIVED"})
        assert response.status_code == 422


class TestBookingQueries:
    def test_filters(self, client, owner, sitter, make_user, make_booking):
        other_sitter = make_user(UserRole.SITTER)
        make_booking(owner, sitter, BookingStatus.PENDING)
        make_booking(owner, other_sitter, BookingStatus.COMPLETED)

        assert len(client.get(f"/bookings/owner/{owner.id}").json()) == 2
        assert len(client.get(f"/bookings/sitter/{sitter.id}").json()) == 1
        completed = client.get("/bookings/status/COMPLETED").json()
        assert [b["sitterId"] for b in completed] == [other_sitter.id]

    def test_missing_booking(self, client):
        response = client.get("/bookings/123")
        assert response.status_code == 404
        assert response.json()["detail"] == "Booking not found"

    def test_delete(self, client, owner, sitter, make_booking):
        booking = make_booking(owner, sitter)
        response = client.delete(f"/bookings/{booking.id}")
        assert response.json() == {"message": "Booking deleted successfully"}
