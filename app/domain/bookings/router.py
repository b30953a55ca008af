"""Booking router - FastAPI endpoints for booking operations"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ...metrics import BusinessMetrics, get_metrics
from ...models import BookingStatus
from ...services.notification_service import (
    NotificationDispatcher,
    NotificationTransport,
    get_notification_transport,
)
from .schemas import BookingCreate, BookingResponse, BookingStatusUpdate, BookingUpdate
from .service import BookingService

router = APIRouter(prefix="/bookings", tags=["Bookings"])


def get_booking_service(
    db: Session = Depends(get_db),
    transport: NotificationTransport = Depends(get_notification_transport),
    metrics: BusinessMetrics = Depends(get_metrics),
) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(db, NotificationDispatcher(db, transport), metrics)


@router.get("", response_model=list[BookingResponse])
def list_bookings(service: BookingService = Depends(get_booking_service)):
    return service.get_bookings()


@router.get("/owner/{owner_id}", response_model=list[BookingResponse])
def list_bookings_by_owner(owner_id: int, service: BookingService = Depends(get_booking_service)):
    return service.get_bookings_by_owner(owner_id)


@router.get("/sitter/{sitter_id}", response_model=list[BookingResponse])
def list_bookings_by_sitter(
    sitter_id: int, service: BookingService = Depends(get_booking_service)
):
    return service.get_bookings_by_sitter(sitter_id)


@router.get("/status/{status}", response_model=list[BookingResponse])
def list_bookings_by_status(
    status: BookingStatus, service: BookingService = Depends(get_booking_service)
):
    return service.get_bookings_by_status(status)


@router.get("/{booking_id}", response_model=BookingResponse)
def get_booking(booking_id: int, service: BookingService = Depends(get_booking_service)):
    return service.get_booking(booking_id)


@router.post("", response_model=BookingResponse, status_code=201)
def create_booking(body: BookingCreate, service: BookingService = Depends(get_booking_service)):
    return service.create_booking(body)


@router.put("/{booking_id}", response_model=BookingResponse)
def update_booking(
    booking_id: int, body: BookingUpdate, service: BookingService = Depends(get_booking_service)
):
    return service.update_booking(booking_id, body)


@router.patch("/{booking_id}/status", response_model=BookingResponse)
def update_booking_status(
    booking_id: int,
    body: BookingStatusUpdate,
    service: BookingService = Depends(get_booking_service),
):
    return service.update_status(booking_id, body.status)


@router.delete("/{booking_id}")
def delete_booking(booking_id: int, service: BookingService = Depends(get_booking_service)):
    return service.delete_booking(booking_id)
