"""Care session repository - Database operations for sessions"""

from typing import Optional

from sqlalchemy.orm import Session, joinedload

from ...models import Booking, CareSession, SessionStatus, User


class SessionRepository:
    """Repository for care session database operations"""

    @staticmethod
    def get_sessions(db: Session) -> list[CareSession]:
        return db.query(CareSession).order_by(CareSession.id.desc()).all()

    @staticmethod
    def get_session_by_id(db: Session, session_id: int) -> Optional[CareSession]:
        return (
            db.query(CareSession)
            .options(joinedload(CareSession.booking))
            .filter(CareSession.id == session_id)
            .first()
        )

    @staticmethod
    def get_sessions_by_user(
        db: Session, user_id: int, status: Optional[SessionStatus] = None
    ) -> list[CareSession]:
        """Get a user's sessions, newest first, optionally by status"""
        query = db.query(CareSession).filter(CareSession.user_id == user_id)
        if status is not None:
            query = query.filter(CareSession.status == status)
        return query.order_by(CareSession.id.desc()).all()

    @staticmethod
    def get_booking_by_id(db: Session, booking_id: int) -> Optional[Booking]:
        return db.query(Booking).filter(Booking.id == booking_id).first()

    @staticmethod
    def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def create_session(db: Session, **session_data) -> CareSession:
        care_session = CareSession(**session_data)
        db.add(care_session)
        db.commit()
        db.refresh(care_session)
        return care_session

    @staticmethod
    def update_session(db: Session, care_session: CareSession, **updates) -> CareSession:
        for key, value in updates.items():
            if value is not None and hasattr(care_session, key):
                setattr(care_session, key, value)

        db.commit()
        db.refresh(care_session)
        return care_session

    @staticmethod
    def delete_session(db: Session, care_session: CareSession) -> None:
        db.delete(care_session)
        db.commit()

    @staticmethod
    def delete_sessions_by_user(db: Session, user_id: int) -> int:
        """Delete all of a user's sessions. Returns the number removed."""
        deleted = (
            db.query(CareSession)
            .filter(CareSession.user_id == user_id)
            .delete(synchronize_session=False)
        )
        db.commit()
        return deleted
