from sqlalchemy.exc import OperationalError

from app.domain.users.repository import UserRepository
from app.metrics import BusinessMetrics


def test_root(client):
    assert client.get("/").json() == {"message": "PetSitting API is running"}


def test_health_reports_database(client):
    data = client.get("/health").json()

    assert data["status"] == "healthy"
    assert data["services"] == {"database": "connected"}
    assert data["version"]
    assert data["timestamp"]


def test_database_errors_become_500(client, monkeypatch):
    def broken(db, role=None):
        raise OperationalError("SELECT", {}, Exception("connection refused"))

    monkeypatch.setattr(UserRepository, "get_users", staticmethod(broken))

    response = client.get("/users")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def test_request_validation_errors_are_422(client):
    response = client.post("/users", json={"email": "a@b.co"})
    assert response.status_code == 422
    assert isinstance(response.json()["detail"], list)


class TestBusinessMetrics:
    def test_endpoint_reflects_activity(self, client, owner, sitter, make_booking):
        booking = make_booking(owner, sitter)
        client.patch(f"/bookings/{booking.id}/status", json={"status": "COMPLETED"})
        client.post(
            "/payments",
            json={"bookingId": booking.id, "amount": 25.5, "paymentMethod": "APPLE_PAY"},
        )

        data = client.get("/metrics/business").json()

        assert data["bookingTransitions"] == {"COMPLETED": 1}
        assert data["paymentsByStatus"] == {"PAID": 1}
        assert data["revenueTotal"] == 25.5

    def test_reset_clears_counters(self):
        metrics = BusinessMetrics()
        metrics.record_booking_created()
        metrics.record_payment("PAID", 10)
        metrics.record_refund(4)
        metrics.record_review(5)

        metrics.reset()
        snapshot = metrics.snapshot()

        assert snapshot["bookingsCreated"] == 0
        assert snapshot["paymentsByStatus"] == {}
        assert snapshot["refunds"] == 0
        assert snapshot["revenueTotal"] == 0
        assert snapshot["reviewsSubmitted"] == 0
        assert snapshot["ratingDistribution"] == {"1": 0, "2": 0, "3": 0, "4": 0, "5": 0}

    def test_refund_reduces_revenue(self):
        metrics = BusinessMetrics()
        metrics.record_payment("PAID", 30)
        metrics.record_payment("FAILED", 99)
        metrics.record_refund(30)

        assert metrics.snapshot()["revenueTotal"] == 0
        assert metrics.snapshot()["paymentsByStatus"] == {"PAID": 1, "FAILED": 1}
