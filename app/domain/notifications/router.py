"""Notification router - FastAPI endpoints for notification operations"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ...models import NotificationType
from .schemas import (
    NotificationCreate,
    NotificationResponse,
    NotificationUpdate,
    UnreadCountResponse,
)
from .service import NotificationService

router = APIRouter(prefix="/notifications", tags=["Notifications"])


def get_notification_service(db: Session = Depends(get_db)) -> NotificationService:
    """Dependency injection for NotificationService"""
    return NotificationService(db)


@router.get("", response_model=list[NotificationResponse])
def list_notifications(service: NotificationService = Depends(get_notification_service)):
    return service.get_notifications()


@router.get("/user/{user_id}", response_model=list[NotificationResponse])
def list_user_notifications(
    user_id: int, service: NotificationService = Depends(get_notification_service)
):
    return service.get_notifications_by_user(user_id)


@router.get("/user/{user_id}/unread", response_model=list[NotificationResponse])
def list_unread_notifications(
    user_id: int, service: NotificationService = Depends(get_notification_service)
):
    return service.get_unread_by_user(user_id)


@router.get("/user/{user_id}/unread-count", response_model=UnreadCountResponse)
def unread_count(user_id: int, service: NotificationService = Depends(get_notification_service)):
    return service.get_unread_count(user_id)


@router.get("/type/{notification_type}", response_model=list[NotificationResponse])
def list_notifications_by_type(
    notification_type: NotificationType,
    service: NotificationService = Depends(get_notification_service),
):
    return service.get_notifications_by_type(notification_type)


@router.get("/{notification_id}", response_model=NotificationResponse)
def get_notification(
    notification_id: int, service: NotificationService = Depends(get_notification_service)
):
    return service.get_notification(notification_id)


@router.post("", response_model=NotificationResponse, status_code=201)
def create_notification(
    body: NotificationCreate, service: NotificationService = Depends(get_notification_service)
):
    return service.create_notification(body)


@router.put("/{notification_id}", response_model=NotificationResponse)
def update_notification(
    notification_id: int,
    body: NotificationUpdate,
    service: NotificationService = Depends(get_notification_service),
):
    return service.update_notification(notification_id, body)


@router.put("/{notification_id}/read", response_model=NotificationResponse)
def mark_as_read(
    notification_id: int, service: NotificationService = Depends(get_notification_service)
):
    return service.mark_as_read(notification_id)


@router.put("/user/{user_id}/read-all")
def mark_all_as_read(user_id: int, service: NotificationService = Depends(get_notification_service)):
    return service.mark_all_as_read(user_id)


@router.delete("/user/{user_id}")
def delete_user_notifications(
    user_id: int, service: NotificationService = Depends(get_notification_service)
):
    return service.delete_all_by_user(user_id)


@router.delete("/{notification_id}")
def delete_notification(
    notification_id: int, service: NotificationService = Depends(get_notification_service)
):
    return service.delete_notification(notification_id)
