"""Notification repository - Database operations for notifications"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import Notification, NotificationType, User


class NotificationRepository:
    """Repository for notification database operations"""

    @staticmethod
    def get_notifications(db: Session) -> list[Notification]:
        """Get all notifications, newest first"""
        return db.query(Notification).order_by(Notification.created_at.desc(), Notification.id.desc()).all()

    @staticmethod
    def get_notification_by_id(db: Session, notification_id: int) -> Optional[Notification]:
        """Get a specific notification by ID"""
        return db.query(Notification).filter(Notification.id == notification_id).first()

    @staticmethod
    def get_notifications_by_user(
        db: Session, user_id: int, unread_only: bool = False
    ) -> list[Notification]:
        """Get notifications for a user, optionally only unread ones"""
        query = db.query(Notification).filter(Notification.user_id == user_id)
        if unread_only:
            query = query.filter(Notification.is_read.is_(False))
        return query.order_by(Notification.created_at.desc(), Notification.id.desc()).all()

    @staticmethod
    def get_notifications_by_type(db: Session, notification_type: NotificationType) -> list[Notification]:
        """Get notifications of one type"""
        return (
            db.query(Notification)
            .filter(Notification.type == notification_type)
            .order_by(Notification.created_at.desc(), Notification.id.desc())
            .all()
        )

    @staticmethod
    def count_unread(db: Session, user_id: int) -> int:
        """Count unread notifications for a user"""
        return (
            db.query(func.count(Notification.id))
            .filter(Notification.user_id == user_id, Notification.is_read.is_(False))
            .scalar()
        )

    @staticmethod
    def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
        """Get a user by ID"""
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def create_notification(db: Session, **notification_data) -> Notification:
        """Create a new notification"""
        notification = Notification(**notification_data)
        db.add(notification)
        db.commit()
        db.refresh(notification)
        return notification

    @staticmethod
    def update_notification(db: Session, notification: Notification, **updates) -> Notification:
        """Update a notification with provided fields"""
        for key, value in updates.items():
            if value is not None and hasattr(notification, key):
                setattr(notification, key, value)

        db.commit()
        db.refresh(notification)
        return notification

    @staticmethod
    def mark_all_read(db: Session, user_id: int) -> int:
        """Mark every unread notification of a user as read. Returns count updated."""
        updated = (
            db.query(Notification)
            .filter(Notification.user_id == user_id, Notification.is_read.is_(False))
            .update({Notification.is_read: True}, synchronize_session=False)
        )
        db.commit()
        return updated

    @staticmethod
    def delete_notification(db: Session, notification: Notification) -> None:
        """Delete a notification"""
        db.delete(notification)
        db.commit()

    @staticmethod
    def delete_notifications_by_user(db: Session, user_id: int) -> int:
        """Delete all notifications for a user. Returns count deleted."""
        deleted = (
            db.query(Notification)
            .filter(Notification.user_id == user_id)
            .delete(synchronize_session=False)
        )
        db.commit()
        return deleted
