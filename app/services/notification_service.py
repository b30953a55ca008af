"""
In-app notification dispatch
Persists a notification row for the recipient and hands it to a transport.
The default transport only logs; there is no push/WebSocket delivery.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy.orm import Session

from ..domain.notifications.repository import NotificationRepository
from ..models import Notification, NotificationType

logger = logging.getLogger(__name__)


class NotificationTransport(ABC):
    """Delivery channel for persisted notifications"""

    @abstractmethod
    def deliver(self, notification: Notification) -> None:
        ...


class LoggingTransport(NotificationTransport):
    def deliver(self, notification: Notification) -> None:
        logger.info(
            f"🔔 {notification.type.value} -> user {notification.user_id}: {notification.title}"
        )


class NotificationDispatcher:
    """Creates notifications on behalf of the resource services.

    Dispatch never fails the request that triggered it: errors are logged
    and the session is rolled back so the caller can keep using it.
    """

    def __init__(self, db: Session, transport: Optional[NotificationTransport] = None):
        self.db = db
        self.repo = NotificationRepository()
        self.transport = transport or LoggingTransport()

    def send(
        self,
        user_id: int,
        notification_type: NotificationType,
        title: str,
        message: str,
        data: Optional[dict] = None,
    ) -> Optional[Notification]:
        try:
            notification = self.repo.create_notification(
                self.db,
                user_id=user_id,
                type=notification_type,
                title=title,
                message=message,
                data=data or {},
            )
            self.transport.deliver(notification)
            return notification
        except Exception as e:
            self.db.rollback()
            logger.error(f"❌ Failed to send {notification_type.value} notification to user {user_id}: {e}")
            return None

    def booking_created(self, booking) -> None:
        self.send(
            booking.sitter_id,
            NotificationType.BOOKING_CONFIRMED,
            "New booking request",
            f"You have a new booking request starting {booking.start_date:%Y-%m-%d %H:%M}",
            {
                "bookingId": booking.id,
                "startTime": booking.start_date.isoformat(),
                "endTime": booking.end_date.isoformat(),
                "totalPrice": float(booking.total_amount),
            },
        )

    def booking_confirmed(self, booking) -> None:
        self.send(
            booking.owner_id,
            NotificationType.BOOKING_CONFIRMED,
            "Booking confirmed",
            "Your sitter has confirmed the booking",
            {"bookingId": booking.id, "status": booking.status.value},
        )

    def payment_received(self, payment) -> None:
        self.send(
            payment.booking.sitter_id,
            NotificationType.PAYMENT_RECEIVED,
            "Payment received",
            f"A payment of {payment.amount} {payment.currency} was received",
            {"paymentId": payment.id, "bookingId": payment.booking_id},
        )

    def review_received(self, review) -> None:
        self.send(
            review.reviewed_user_id,
            NotificationType.REVIEW_RECEIVED,
            "New review",
            f"You received a {review.rating}-star review",
            {"reviewId": review.id, "bookingId": review.booking_id, "rating": review.rating},
        )

    def session_started(self, session) -> None:
        self.send(
            session.booking.owner_id,
            NotificationType.SESSION_STARTED,
            "Care session started",
            "Your sitter has started a care session",
            {"sessionId": session.id, "bookingId": session.booking_id},
        )

    def session_ended(self, session) -> None:
        self.send(
            session.booking.owner_id,
            NotificationType.SESSION_ENDED,
            "Care session ended",
            "Your sitter has ended the care session",
            {"sessionId": session.id, "bookingId": session.booking_id},
        )


def get_notification_transport() -> NotificationTransport:
    """Dependency returning the delivery transport (overridden in tests)"""
    return LoggingTransport()
