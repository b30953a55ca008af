"""Payment repository - Database operations for payments"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Booking, Payment, PaymentStatus


class PaymentRepository:
    """Repository for payment database operations"""

    @staticmethod
    def get_payments(
        db: Session,
        booking_id: Optional[int] = None,
        status: Optional[PaymentStatus] = None,
    ) -> list[Payment]:
        """Get payments with optional filters, newest first"""
        query = db.query(Payment)
        if booking_id is not None:
            query = query.filter(Payment.booking_id == booking_id)
        if status is not None:
            query = query.filter(Payment.status == status)
        return query.order_by(Payment.created_at.desc(), Payment.id.desc()).all()

    @staticmethod
    def get_payment_by_id(db: Session, payment_id: int) -> Optional[Payment]:
        """Get a specific payment by ID"""
        return db.query(Payment).filter(Payment.id == payment_id).first()

    @staticmethod
    def get_booking_by_id(db: Session, booking_id: int) -> Optional[Booking]:
        """Get a booking by ID"""
        return db.query(Booking).filter(Booking.id == booking_id).first()

    @staticmethod
    def create_payment(db: Session, **payment_data) -> Payment:
        """Insert a payment. Raises IntegrityError if the booking already has one."""
        payment = Payment(**payment_data)
        db.add(payment)
        db.commit()
        db.refresh(payment)
        return payment

    @staticmethod
    def update_payment(db: Session, payment: Payment, **updates) -> Payment:
        """Update a payment with provided fields"""
        for key, value in updates.items():
            if value is not None and hasattr(payment, key):
                setattr(payment, key, value)

        db.commit()
        db.refresh(payment)
        return payment

    @staticmethod
    def delete_payment(db: Session, payment: Payment) -> None:
        """Delete a payment"""
        db.delete(payment)
        db.commit()
