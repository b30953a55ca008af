"""Care session service - Business logic for session operations"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import CareSession, SessionStatus
from ...services.notification_service import NotificationDispatcher
from ...shared.validators import utc_now
from ...utils.sanitization import sanitize_string
from .repository import SessionRepository
from .schemas import SessionCreate, SessionUpdate

logger = logging.getLogger(__name__)


class SessionService:
    """Service layer for care session business logic"""

    def __init__(self, db: Session, notifier: Optional[NotificationDispatcher] = None):
        self.db = db
        self.repo = SessionRepository()
        self.notifier = notifier or NotificationDispatcher(db)

    def get_sessions(self) -> list[CareSession]:
        return self.repo.get_sessions(self.db)

    def get_session(self, session_id: int) -> CareSession:
        care_session = self.repo.get_session_by_id(self.db, session_id)
        if not care_session:
            raise HTTPException(status_code=404, detail="Session not found")
        return care_session

    def get_sessions_by_user(self, user_id: int) -> list[CareSession]:
        return self.repo.get_sessions_by_user(self.db, user_id)

    def get_active_sessions(self, user_id: int) -> list[CareSession]:
        return self.repo.get_sessions_by_user(self.db, user_id, status=SessionStatus.ACTIVE)

    def create_session(self, data: SessionCreate) -> CareSession:
        if not self.repo.get_booking_by_id(self.db, data.bookingId):
            raise HTTPException(status_code=400, detail="Booking not found")
        if not self.repo.get_user_by_id(self.db, data.userId):
            raise HTTPException(status_code=400, detail="User not found")

        care_session = self.repo.create_session(
            self.db,
            user_id=data.userId,
            booking_id=data.bookingId,
            status=SessionStatus.ACTIVE,
            start_time=data.startTime or utc_now(),
            notes=sanitize_string(data.notes),
        )
        logger.info(f"✅ Session {care_session.id} started for booking {data.bookingId}")
        self.notifier.session_started(care_session)
        return care_session

    def update_session(self, session_id: int, data: SessionUpdate) -> CareSession:
        care_session = self.get_session(session_id)
        return self.repo.update_session(
            self.db,
            care_session,
            notes=sanitize_string(data.notes),
            end_time=data.endTime,
        )

    def deactivate_session(self, session_id: int) -> CareSession:
        care_session = self.get_session(session_id)
        if care_session.status == SessionStatus.COMPLETED:
            raise HTTPException(status_code=400, detail="Session is already completed")

        care_session = self.repo.update_session(
            self.db,
            care_session,
            status=SessionStatus.COMPLETED,
            end_time=utc_now(),
        )
        logger.info(f"📝 Session {session_id} completed")
        self.notifier.session_ended(care_session)
        return care_session

    def delete_session(self, session_id: int) -> dict:
        care_session = self.get_session(session_id)
        self.repo.delete_session(self.db, care_session)
        return {"message": "Session deleted successfully"}

    def delete_all_by_user(self, user_id: int) -> dict:
        deleted = self.repo.delete_sessions_by_user(self.db, user_id)
        logger.info(f"🗑️ Deleted {deleted} sessions for user {user_id}")
        return {"message": "All sessions deleted successfully", "deletedCount": deleted}
