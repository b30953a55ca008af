"""User router - FastAPI endpoints for user operations"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...database import get_db
from .schemas import UserCreate, UserResponse, UserUpdate
from .service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Dependency injection for UserService"""
    return UserService(db)


@router.get("", response_model=list[UserResponse])
def list_users(service: UserService = Depends(get_user_service)):
    return service.get_users()


@router.get("/sitters", response_model=list[UserResponse])
def list_sitters(service: UserService = Depends(get_user_service)):
    return service.get_sitters()


@router.get("/owners", response_model=list[UserResponse])
def list_owners(service: UserService = Depends(get_user_service)):
    return service.get_owners()


@router.get("/by-email", response_model=UserResponse)
def get_user_by_email(
    email: str = Query(..., description="Email address to look up"),
    service: UserService = Depends(get_user_service),
):
    return service.get_user_by_email(email)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    return service.get_user(user_id)


@router.post("", response_model=UserResponse, status_code=201)
def create_user(body: UserCreate, service: UserService = Depends(get_user_service)):
    return service.create_user(body)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: int, body: UserUpdate, service: UserService = Depends(get_user_service)):
    return service.update_user(user_id, body)


@router.delete("/{user_id}")
def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    return service.delete_user(user_id)
