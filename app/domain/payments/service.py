"""Payment service - Business logic for payment operations"""

import logging
from decimal import Decimal
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...metrics import BusinessMetrics
from ...models import Payment, PaymentStatus
from ...services.notification_service import NotificationDispatcher
from ...services.payment_gateway import MockPaymentGateway, PaymentGateway
from ...utils.sanitization import sanitize_string
from .repository import PaymentRepository
from .schemas import PaymentCreate, PaymentUpdate

logger = logging.getLogger(__name__)


class PaymentService:
    """Service layer for payment business logic"""

    def __init__(
        self,
        db: Session,
        gateway: Optional[PaymentGateway] = None,
        notifier: Optional[NotificationDispatcher] = None,
        metrics: Optional[BusinessMetrics] = None,
    ):
        self.db = db
        self.repo = PaymentRepository()
        self.gateway = gateway or MockPaymentGateway()
        self.notifier = notifier or NotificationDispatcher(db)
        self.metrics = metrics or BusinessMetrics()

    def get_payments(self) -> list[Payment]:
        return self.repo.get_payments(self.db)

    def get_payments_by_booking(self, booking_id: int) -> list[Payment]:
        return self.repo.get_payments(self.db, booking_id=booking_id)

    def get_payments_by_status(self, status: PaymentStatus) -> list[Payment]:
        return self.repo.get_payments(self.db, status=status)

    def get_payment(self, payment_id: int) -> Payment:
        payment = self.repo.get_payment_by_id(self.db, payment_id)
        if not payment:
            raise HTTPException(status_code=404, detail="Payment not found")
        return payment

    def create_payment(self, data: PaymentCreate) -> Payment:
        """
        Record and charge the payment for a booking.

        The row is inserted as PENDING first so the unique booking index
        rejects a second payment before any charge is attempted.
        """
        booking = self.repo.get_booking_by_id(self.db, data.bookingId)
        if not booking:
            raise HTTPException(status_code=400, detail="Booking not found")

        try:
            payment = self.repo.create_payment(
                self.db,
                booking_id=booking.id,
                amount=Decimal(str(data.amount)),
                currency=data.currency,
                payment_method=data.paymentMethod,
                description=sanitize_string(data.description),
                status=PaymentStatus.PENDING,
            )
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(status_code=400, detail="Payment already exists for this booking")

        logger.info(f"💳 Payment {payment.id} recorded for booking {booking.id}")
        return self._charge(payment)

    def process_payment(self, payment_id: int) -> Payment:
        payment = self.get_payment(payment_id)
        if payment.status != PaymentStatus.PENDING:
            raise HTTPException(status_code=400, detail="Payment is not in pending status")
        return self._charge(payment)

    def refund_payment(self, payment_id: int, reason: Optional[str] = None) -> Payment:
        payment = self.get_payment(payment_id)
        if payment.status != PaymentStatus.PAID:
            raise HTTPException(
                status_code=400, detail="Payment is not completed and cannot be refunded"
            )

        result = self.gateway.refund(payment.transaction_id, payment.amount)
        if not result.success:
            logger.error(f"❌ Refund failed for payment {payment.id}: {result.error}")
            raise HTTPException(status_code=400, detail=f"Refund failed: {result.error}")

        payment = self.repo.update_payment(self.db, payment, status=PaymentStatus.REFUNDED)
        self.metrics.record_refund(payment.amount)
        logger.info(f"↩️ Payment {payment.id} refunded{f' ({reason})' if reason else ''}")
        return payment

    def update_payment(self, payment_id: int, data: PaymentUpdate) -> Payment:
        payment = self.get_payment(payment_id)
        updates = {"status": data.status, "transaction_id": data.transactionId}
        return self.repo.update_payment(self.db, payment, **updates)

    def delete_payment(self, payment_id: int) -> dict:
        payment = self.get_payment(payment_id)
        self.repo.delete_payment(self.db, payment)
        return {"message": "Payment deleted successfully"}

    def _charge(self, payment: Payment) -> Payment:
        result = self.gateway.charge(
            payment.amount, payment.currency, payment.payment_method.value
        )
        if result.success:
            payment = self.repo.update_payment(
                self.db,
                payment,
                status=PaymentStatus.PAID,
                transaction_id=result.transaction_id,
            )
            logger.info(f"✅ Payment {payment.id} paid ({payment.transaction_id})")
        else:
            payment = self.repo.update_payment(self.db, payment, status=PaymentStatus.FAILED)
            logger.warning(f"⚠️ Payment {payment.id} failed: {result.error}")

        self.metrics.record_payment(payment.status.value, payment.amount)
        if payment.status == PaymentStatus.PAID:
            self.notifier.payment_received(payment)
        return payment
