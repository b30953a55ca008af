"""Booking service - Business logic for booking operations"""

import logging
from decimal import Decimal
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...metrics import BusinessMetrics
from ...models import Booking, BookingStatus, UserRole
from ...services.notification_service import NotificationDispatcher
from ...utils.sanitization import sanitize_string
from .repository import BookingRepository
from .schemas import BookingCreate, BookingUpdate
from .status import InvalidStatusTransition, ensure_transition

logger = logging.getLogger(__name__)


class BookingService:
    """Service layer for booking business logic"""

    def __init__(
        self,
        db: Session,
        notifier: Optional[NotificationDispatcher] = None,
        metrics: Optional[BusinessMetrics] = None,
    ):
        self.db = db
        self.repo = BookingRepository()
        self.notifier = notifier or NotificationDispatcher(db)
        self.metrics = metrics or BusinessMetrics()

    def get_bookings(self) -> list[Booking]:
        return self.repo.get_bookings(self.db)

    def get_bookings_by_owner(self, owner_id: int) -> list[Booking]:
        return self.repo.get_bookings(self.db, owner_id=owner_id)

    def get_bookings_by_sitter(self, sitter_id: int) -> list[Booking]:
        return self.repo.get_bookings(self.db, sitter_id=sitter_id)

    def get_bookings_by_status(self, status: BookingStatus) -> list[Booking]:
        return self.repo.get_bookings(self.db, status=status)

    def get_booking(self, booking_id: int) -> Booking:
        booking = self.repo.get_booking_by_id(self.db, booking_id)
        if not booking:
            raise HTTPException(status_code=404, detail="Booking not found")
        return booking

    def create_booking(self, data: BookingCreate) -> Booking:
        """Create a PENDING booking after validating parties, pets and availability"""
        owner = self.repo.get_user_by_id(self.db, data.ownerId)
        if not owner or owner.role != UserRole.OWNER:
            raise HTTPException(status_code=400, detail="Invalid owner")

        sitter = self.repo.get_user_by_id(self.db, data.sitterId)
        if not sitter or sitter.role != UserRole.SITTER:
            raise HTTPException(status_code=400, detail="Invalid sitter")

        if data.endDate <= data.startDate:
            raise HTTPException(status_code=400, detail="End date must be after start date")

        pet_ids = list(dict.fromkeys(data.petIds))
        pets = self.repo.get_owner_pets(self.db, owner.id, pet_ids)
        found_ids = {pet.id for pet in pets}
        for pet_id in pet_ids:
            if pet_id not in found_ids:
                raise HTTPException(
                    status_code=400, detail=f"Pet {pet_id} not found or doesn't belong to owner"
                )

        conflict = self.repo.find_conflicting_booking(
            self.db, sitter.id, data.startDate, data.endDate
        )
        if conflict:
            raise HTTPException(
                status_code=400, detail="Sitter is not available for the selected time"
            )

        booking = self.repo.create_booking(
            self.db,
            pets,
            owner_id=owner.id,
            sitter_id=sitter.id,
            start_date=data.startDate,
            end_date=data.endDate,
            total_amount=Decimal(str(data.totalAmount)),
            hourly_rate=data.hourlyRate if data.hourlyRate is not None else sitter.hourly_rate,
            location=sanitize_string(data.location),
            special_instructions=sanitize_string(data.specialInstructions),
            status=BookingStatus.PENDING,
        )
        logger.info(f"📝 Booking {booking.id} created: owner {owner.id} -> sitter {sitter.id}")

        self.metrics.record_booking_created()
        self.notifier.booking_created(booking)
        return booking

    def update_booking(self, booking_id: int, data: BookingUpdate) -> Booking:
        booking = self.get_booking(booking_id)
        previous_status = booking.status

        if data.status is not None:
            self._check_transition(booking, data.status)

        start = data.startDate or booking.start_date
        end = data.endDate or booking.end_date
        if data.startDate or data.endDate:
            if end <= start:
                raise HTTPException(status_code=400, detail="End date must be after start date")
            conflict = self.repo.find_conflicting_booking(
                self.db, booking.sitter_id, start, end, exclude_id=booking.id
            )
            if conflict:
                raise HTTPException(
                    status_code=400, detail="Sitter is not available for the selected time"
                )

        updates = {}
        if data.startDate is not None:
            updates["start_date"] = data.startDate
        if data.endDate is not None:
            updates["end_date"] = data.endDate
        if data.totalAmount is not None:
            updates["total_amount"] = Decimal(str(data.totalAmount))
        if data.specialInstructions is not None:
            updates["special_instructions"] = sanitize_string(data.specialInstructions)
        if data.status is not None:
            updates["status"] = data.status

        booking = self.repo.update_booking(self.db, booking, **updates)
        self._after_status_change(booking, previous_status)
        return booking

    def update_status(self, booking_id: int, status: BookingStatus) -> Booking:
        booking = self.get_booking(booking_id)
        previous_status = booking.status
        self._check_transition(booking, status)

        booking = self.repo.update_booking(self.db, booking, status=status)
        self._after_status_change(booking, previous_status)
        return booking

    def delete_booking(self, booking_id: int) -> dict:
        booking = self.get_booking(booking_id)
        self.repo.delete_booking(self.db, booking)
        logger.info(f"🗑️ Booking {booking_id} deleted")
        return {"message": "Booking deleted successfully"}

    def _check_transition(self, booking: Booking, status: BookingStatus) -> None:
        try:
            ensure_transition(booking.status, status)
        except InvalidStatusTransition as e:
            raise HTTPException(status_code=400, detail=str(e))

    def _after_status_change(self, booking: Booking, previous_status: BookingStatus) -> None:
        if booking.status == previous_status:
            return

        logger.info(
            f"🔄 Booking {booking.id} status {previous_status.value} -> {booking.status.value}"
        )
        self.metrics.record_booking_transition(booking.status.value)
        if booking.status == BookingStatus.CONFIRMED:
            self.notifier.booking_confirmed(booking)
