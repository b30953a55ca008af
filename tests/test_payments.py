import pytest

from app.models import BookingStatus, PaymentStatus
from app.services.payment_gateway import PaymentGateway


def pay(client, booking, amount=80, method="CREDIT_CARD", **extra):
    body = {"bookingId": booking.id, "amount": amount, "paymentMethod": method, **extra}
    return client.post("/payments", json=body)


class TestCreatePayment:
    def test_charge_marks_payment_paid(
        self, client, owner, sitter, make_booking, gateway, transport, metrics
    ):
        booking = make_booking(owner, sitter, BookingStatus.CONFIRMED)

        response = pay(client, booking, currency="usd")

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "PAID"
        assert data["transactionId"] == "txn_test_1"
        assert data["currency"] == "USD"
        assert len(gateway.charges) == 1
        assert transport.delivered == [(sitter.id, "PAYMENT_RECEIVED")]
        assert metrics.payments_by_status["PAID"] == 1
        assert metrics.snapshot()["revenueTotal"] == 80.0

    def test_declined_charge_marks_payment_failed(
        self, client, owner, sitter, make_booking, gateway, transport, metrics
    ):
        gateway.approve = False
        booking = make_booking(owner, sitter)

        data = pay(client, booking).json()

        assert data["status"] == "FAILED"
        assert data["transactionId"] is None
        assert transport.delivered == []
        assert metrics.payments_by_status["FAILED"] == 1
        assert metrics.snapshot()["revenueTotal"] == 0

    def test_missing_booking(self, client):
        response = client.post(
            "/payments", json={"bookingId": 77, "amount": 10, "paymentMethod": "PAYPAL"}
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Booking not found"

    def test_second_payment_for_booking_rejected_without_charging(
        self, client, owner, sitter, make_booking, gateway
    ):
        booking = make_booking(owner, sitter)
        assert pay(client, booking).status_code == 201

        response = pay(client, booking)

        assert response.status_code == 400
        assert response.json()["detail"] == "Payment already exists for this booking"
        assert len(gateway.charges) == 1

    def test_amount_must_be_positive(self, client, owner, sitter, make_booking):
        assert pay(client, make_booking(owner, sitter), amount=0).status_code == 422


class TestProcessAndRefund:
    def test_process_pending_payment(self, client, owner, sitter, make_booking, make_payment):
        payment = make_payment(make_booking(owner, sitter), status=PaymentStatus.PENDING)

        response = client.post(f"/payments/{payment.id}/process")

        assert response.status_code == 200
        assert response.json()["status"] == "PAID"

    def test_process_rejects_non_pending(self, client, owner, sitter, make_booking, make_payment):
        payment = make_payment(make_booking(owner, sitter), status=PaymentStatus.PAID)

        response = client.post(f"/payments/{payment.id}/process")

        assert response.status_code == 400
        assert response.json()["detail"] == "Payment is not in pending status"

    def test_refund_paid_payment(
        self, client, owner, sitter, make_booking, make_payment, gateway, metrics
    ):
        payment = make_payment(make_booking(owner, sitter), amount="40.00")

        response = client.post(f"/payments/{payment.id}/refund", json={"reason": "sitter ill"})

        assert response.status_code == 200
        assert response.json()["status"] == "REFUNDED"
        assert len(gateway.refunds) == 1
        assert metrics.refunds == 1

    def test_refund_requires_paid_status(self, client, owner, sitter, make_booking, make_payment):
        payment = make_payment(make_booking(owner, sitter), status=PaymentStatus.FAILED)

        response = client.post(f"/payments/{payment.id}/refund")

        assert response.status_code == 400

    def test_missing_payment(self, client):
        assert client.post("/payments/5/refund").status_code == 404


def test_payment_queries(client, owner, sitter, make_booking, make_payment):
    first = make_booking(owner, sitter)
    second = make_booking(owner, sitter)
    make_payment(first, status=PaymentStatus.PAID)
    make_payment(second, status=PaymentStatus.FAILED)

    assert [p["bookingId"] for p in client.get(f"/payments/booking/{first.id}").json()] == [first.id]
    failed = client.get("/payments/status/FAILED").json()
    assert [p["bookingId"] for p in failed] == [second.id]
    assert len(client.get("/payments").json()) == 2


def test_gateway_must_implement_refund():
    class ChargeOnly(PaymentGateway):
        def charge(self, amount, currency, method):
            return None

    with pytest.raises(TypeError):
        ChargeOnly()
