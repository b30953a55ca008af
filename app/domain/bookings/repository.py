"""Booking repository - Database operations for bookings"""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session, joinedload, selectinload

from ...models import Booking, BookingStatus, Pet, User
from .status import ACTIVE_STATUSES


class BookingRepository:
    """Repository for booking database operations"""

    @staticmethod
    def _base_query(db: Session):
        return db.query(Booking).options(
            joinedload(Booking.owner),
            joinedload(Booking.sitter),
            selectinload(Booking.pets),
        )

    @staticmethod
    def get_bookings(
        db: Session,
        owner_id: Optional[int] = None,
        sitter_id: Optional[int] = None,
        status: Optional[BookingStatus] = None,
    ) -> list[Booking]:
        """Get bookings with optional filters, newest first"""
        query = BookingRepository._base_query(db)
        if owner_id is not None:
            query = query.filter(Booking.owner_id == owner_id)
        if sitter_id is not None:
            query = query.filter(Booking.sitter_id == sitter_id)
        if status is not None:
            query = query.filter(Booking.status == status)
        return query.order_by(Booking.created_at.desc(), Booking.id.desc()).all()

    @staticmethod
    def get_booking_by_id(db: Session, booking_id: int) -> Optional[Booking]:
        """Get a specific booking by ID"""
        return BookingRepository._base_query(db).filter(Booking.id == booking_id).first()

    @staticmethod
    def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
        """Get a user by ID"""
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def get_owner_pets(db: Session, owner_id: int, pet_ids: list[int]) -> list[Pet]:
        """Get the subset of `pet_ids` that belong to `owner_id`"""
        if not pet_ids:
            return []
        return db.query(Pet).filter(Pet.id.in_(pet_ids), Pet.owner_id == owner_id).all()

    @staticmethod
    def find_conflicting_booking(
        db: Session,
        sitter_id: int,
        start: datetime,
        end: datetime,
        exclude_id: Optional[int] = None,
    ) -> Optional[Booking]:
        """Find an active booking of the sitter overlapping [start, end)"""
        query = db.query(Booking).filter(
            Booking.sitter_id == sitter_id,
            Booking.status.in_(ACTIVE_STATUSES),
            Booking.start_date < end,
            Booking.end_date > start,
        )
        if exclude_id is not None:
            query = query.filter(Booking.id != exclude_id)
        return query.first()

    @staticmethod
    def create_booking(db: Session, pets: list[Pet], **booking_data) -> Booking:
        """Create a new booking linked to `pets`"""
        booking = Booking(**booking_data)
        booking.pets = pets
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def update_booking(db: Session, booking: Booking, **updates) -> Booking:
        """Update a booking with provided fields"""
        for key, value in updates.items():
            if value is not None and hasattr(booking, key):
                setattr(booking, key, value)

        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def delete_booking(db: Session, booking: Booking) -> None:
        """Delete a booking"""
        db.delete(booking)
        db.commit()
