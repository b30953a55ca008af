"""Payment router - FastAPI endpoints for payment operations"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ...metrics import BusinessMetrics, get_metrics
from ...models import PaymentStatus
from ...services.notification_service import (
    NotificationDispatcher,
    NotificationTransport,
    get_notification_transport,
)
from ...services.payment_gateway import PaymentGateway, get_payment_gateway
from .schemas import PaymentCreate, PaymentResponse, PaymentUpdate, RefundRequest
from .service import PaymentService

router = APIRouter(prefix="/payments", tags=["Payments"])


def get_payment_service(
    db: Session = Depends(get_db),
    gateway: PaymentGateway = Depends(get_payment_gateway),
    transport: NotificationTransport = Depends(get_notification_transport),
    metrics: BusinessMetrics = Depends(get_metrics),
) -> PaymentService:
    """Dependency injection for PaymentService"""
    return PaymentService(db, gateway, NotificationDispatcher(db, transport), metrics)


@router.get("", response_model=list[PaymentResponse])
def list_payments(service: PaymentService = Depends(get_payment_service)):
    return service.get_payments()


@router.get("/booking/{booking_id}", response_model=list[PaymentResponse])
def list_payments_by_booking(
    booking_id: int, service: PaymentService = Depends(get_payment_service)
):
    return service.get_payments_by_booking(booking_id)


@router.get("/status/{status}", response_model=list[PaymentResponse])
def list_payments_by_status(
    status: PaymentStatus, service: PaymentService = Depends(get_payment_service)
):
    return service.get_payments_by_status(status)


@router.get("/{payment_id}", response_model=PaymentResponse)
def get_payment(payment_id: int, service: PaymentService = Depends(get_payment_service)):
    return service.get_payment(payment_id)


@router.post("", response_model=PaymentResponse, status_code=201)
def create_payment(body: PaymentCreate, service: PaymentService = Depends(get_payment_service)):
    return service.create_payment(body)


@router.post("/{payment_id}/process", response_model=PaymentResponse)
def process_payment(payment_id: int, service: PaymentService = Depends(get_payment_service)):
    return service.process_payment(payment_id)


@router.post("/{payment_id}/refund", response_model=PaymentResponse)
def refund_payment(
    payment_id: int,
    body: Optional[RefundRequest] = None,
    service: PaymentService = Depends(get_payment_service),
):
    return service.refund_payment(payment_id, body.reason if body else None)


@router.put("/{payment_id}", response_model=PaymentResponse)
def update_payment(
    payment_id: int, body: PaymentUpdate, service: PaymentService = Depends(get_payment_service)
):
    return service.update_payment(payment_id, body)


@router.delete("/{payment_id}")
def delete_payment(payment_id: int, service: PaymentService = Depends(get_payment_service)):
    return service.delete_payment(payment_id)
