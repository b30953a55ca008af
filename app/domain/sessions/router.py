"""Care session router - FastAPI endpoints for session operations"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ...services.notification_service import (
    NotificationDispatcher,
    NotificationTransport,
    get_notification_transport,
)
from .schemas import SessionCreate, SessionResponse, SessionUpdate
from .service import SessionService

router = APIRouter(prefix="/sessions", tags=["Sessions"])


def get_session_service(
    db: Session = Depends(get_db),
    transport: NotificationTransport = Depends(get_notification_transport),
) -> SessionService:
    """Dependency injection for SessionService"""
    return SessionService(db, NotificationDispatcher(db, transport))


@router.get("", response_model=list[SessionResponse])
def list_sessions(service: SessionService = Depends(get_session_service)):
    return service.get_sessions()


@router.get("/user/{user_id}", response_model=list[SessionResponse])
def list_user_sessions(user_id: int, service: SessionService = Depends(get_session_service)):
    return service.get_sessions_by_user(user_id)


@router.get("/user/{user_id}/active", response_model=list[SessionResponse])
def list_active_sessions(user_id: int, service: SessionService = Depends(get_session_service)):
    return service.get_active_sessions(user_id)


@router.get("/{session_id}", response_model=SessionResponse)
def get_session(session_id: int, service: SessionService = Depends(get_session_service)):
    return service.get_session(session_id)


@router.post("", response_model=SessionResponse, status_code=201)
def create_session(body: SessionCreate, service: SessionService = Depends(get_session_service)):
    return service.create_session(body)


@router.put("/{session_id}", response_model=SessionResponse)
def update_session(
    session_id: int, body: SessionUpdate, service: SessionService = Depends(get_session_service)
):
    return service.update_session(session_id, body)


@router.post("/{session_id}/deactivate", response_model=SessionResponse)
def deactivate_session(session_id: int, service: SessionService = Depends(get_session_service)):
    return service.deactivate_session(session_id)


@router.delete("/user/{user_id}")
def delete_user_sessions(user_id: int, service: SessionService = Depends(get_session_service)):
    return service.delete_all_by_user(user_id)


@router.delete("/{session_id}")
def delete_session(session_id: int, service: SessionService = Depends(get_session_service)):
    return service.delete_session(session_id)
