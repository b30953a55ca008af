"""Analytics repository - Read-only queries feeding the aggregation functions"""

from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Query, Session, selectinload

from ...models import (
    Booking,
    BookingStatus,
    Payment,
    PaymentStatus,
    Pet,
    Review,
    User,
    UserRole,
)


def _bounded(query: Query, column, start: Optional[datetime], end: Optional[datetime]) -> Query:
    if start is not None:
        query = query.filter(column >= start)
    if end is not None:
        query = query.filter(column <= end)
    return query


class AnalyticsRepository:
    """Repository for analytics queries"""

    @staticmethod
    def get_entity_counts(db: Session) -> dict[str, int]:
        return {
            "users": db.query(func.count(User.id)).scalar() or 0,
            "bookings": db.query(func.count(Booking.id)).scalar() or 0,
            "pets": db.query(func.count(Pet.id)).scalar() or 0,
            "payments": db.query(func.count(Payment.id)).scalar() or 0,
            "reviews": db.query(func.count(Review.id)).scalar() or 0,
        }

    @staticmethod
    def count_bookings_by_status(db: Session, status: BookingStatus) -> int:
        return db.query(func.count(Booking.id)).filter(Booking.status == status).scalar() or 0

    @staticmethod
    def sum_paid_amounts(db: Session):
        """Sum of PAID payment amounts, None when there are none"""
        return (
            db.query(func.sum(Payment.amount))
            .filter(Payment.status == PaymentStatus.PAID)
            .scalar()
        )

    @staticmethod
    def get_bookings(
        db: Session, start: Optional[datetime] = None, end: Optional[datetime] = None
    ) -> list[Booking]:
        """Bookings created within the optional range, with their parties"""
        query = db.query(Booking).options(
            selectinload(Booking.owner),
            selectinload(Booking.sitter),
            selectinload(Booking.pets),
        )
        query = _bounded(query, Booking.created_at, start, end)
        return query.order_by(Booking.created_at.desc(), Booking.id.desc()).all()

    @staticmethod
    def get_paid_payments(
        db: Session, start: Optional[datetime] = None, end: Optional[datetime] = None
    ) -> list[Payment]:
        query = db.query(Payment).filter(Payment.status == PaymentStatus.PAID)
        query = _bounded(query, Payment.created_at, start, end)
        return query.order_by(Payment.created_at.desc(), Payment.id.desc()).all()

    @staticmethod
    def get_sitters_with_reviews(db: Session) -> list[User]:
        """All sitters in id order with bookings and their reviews loaded up front"""
        return (
            db.query(User)
            .options(selectinload(User.bookings_as_sitter).selectinload(Booking.reviews))
            .filter(User.role == UserRole.SITTER)
            .order_by(User.id)
            .all()
        )

    @staticmethod
    def get_pets(db: Session) -> list[Pet]:
        return db.query(Pet).all()

    @staticmethod
    def get_users(db: Session) -> list[User]:
        return db.query(User).all()

    @staticmethod
    def get_recent_users(db: Session, limit: int) -> list[User]:
        return db.query(User).order_by(User.created_at.desc(), User.id.desc()).limit(limit).all()
