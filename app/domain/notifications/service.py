"""Notification service - Business logic for notification operations"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Notification, NotificationType
from ...utils.sanitization import sanitize_string
from .repository import NotificationRepository
from .schemas import NotificationCreate, NotificationUpdate

logger = logging.getLogger(__name__)


class NotificationService:
    """Service layer for notification business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = NotificationRepository()

    def get_notifications(self) -> list[Notification]:
        return self.repo.get_notifications(self.db)

    def get_notification(self, notification_id: int) -> Notification:
        notification = self.repo.get_notification_by_id(self.db, notification_id)
        if not notification:
            raise HTTPException(status_code=404, detail="Notification not found")
        return notification

    def get_notifications_by_user(self, user_id: int) -> list[Notification]:
        return self.repo.get_notifications_by_user(self.db, user_id)

    def get_unread_by_user(self, user_id: int) -> list[Notification]:
        return self.repo.get_notifications_by_user(self.db, user_id, unread_only=True)

    def get_unread_count(self, user_id: int) -> dict:
        return {"userId": user_id, "unreadCount": self.repo.count_unread(self.db, user_id)}

    def get_notifications_by_type(self, notification_type: NotificationType) -> list[Notification]:
        return self.repo.get_notifications_by_type(self.db, notification_type)

    def create_notification(self, data: NotificationCreate) -> Notification:
        if not self.repo.get_user_by_id(self.db, data.userId):
            raise HTTPException(status_code=400, detail="User not found")

        notification = self.repo.create_notification(
            self.db,
            user_id=data.userId,
            type=data.type,
            title=sanitize_string(data.title),
            message=sanitize_string(data.message),
            data=data.data or {},
        )
        logger.info(f"✅ Notification {notification.id} created for user {data.userId}")
        return notification

    def update_notification(self, notification_id: int, data: NotificationUpdate) -> Notification:
        notification = self.get_notification(notification_id)

        updates = {}
        if data.isRead is not None:
            updates["is_read"] = data.isRead
        if data.title is not None:
            updates["title"] = sanitize_string(data.title)
        if data.message is not None:
            updates["message"] = sanitize_string(data.message)
        if data.data is not None:
            updates["data"] = data.data

        return self.repo.update_notification(self.db, notification, **updates)

    def mark_as_read(self, notification_id: int) -> Notification:
        notification = self.get_notification(notification_id)
        return self.repo.update_notification(self.db, notification, is_read=True)

    def mark_all_as_read(self, user_id: int) -> dict:
        updated = self.repo.mark_all_read(self.db, user_id)
        logger.info(f"✅ Marked {updated} notifications as read for user {user_id}")
        return {"message": "All notifications marked as read", "updatedCount": updated}

    def delete_notification(self, notification_id: int) -> dict:
        notification = self.get_notification(notification_id)
        self.repo.delete_notification(self.db, notification)
        return {"message": "Notification deleted successfully"}

    def delete_all_by_user(self, user_id: int) -> dict:
        deleted = self.repo.delete_notifications_by_user(self.db, user_id)
        logger.info(f"🗑️ Deleted {deleted} notifications for user {user_id}")
        return {"message": "All notifications deleted successfully", "deletedCount": deleted}
