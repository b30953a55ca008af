"""User service - Business logic for user operations"""

import logging

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...models import User, UserRole
from ...utils.sanitization import sanitize_string
from .repository import UserRepository
from .schemas import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Service layer for user business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepository()

    def get_users(self) -> list[User]:
        return self.repo.get_users(self.db)

    def get_sitters(self) -> list[User]:
        return self.repo.get_users(self.db, role=UserRole.SITTER)

    def get_owners(self) -> list[User]:
        return self.repo.get_users(self.db, role=UserRole.OWNER)

    def get_user(self, user_id: int) -> User:
        user = self.repo.get_user_by_id(self.db, user_id)
        if not user:
            raise HTTPException(status_code=404, detail="User not found")
        return user

    def get_user_by_email(self, email: str) -> User:
        user = self.repo.get_user_by_email(self.db, email)
        if not user:
            raise HTTPException(status_code=404, detail="User not found")
        return user

    def create_user(self, data: UserCreate) -> User:
        """Register a user; the unique email index rejects duplicates"""
        user_data = {
            "email": data.email,
            "first_name": sanitize_string(data.firstName),
            "last_name": sanitize_string(data.lastName),
            "role": data.role,
            "phone": data.phone,
            "bio": sanitize_string(data.bio),
            "hourly_rate": data.hourlyRate,
        }

        try:
            user = self.repo.create_user(self.db, **user_data)
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(status_code=400, detail="User with this email already exists")

        logger.info(f"✅ User {user.id} registered as {user.role.value}")
        return user

    def update_user(self, user_id: int, data: UserUpdate) -> User:
        user = self.get_user(user_id)

        updates = {}
        if data.firstName is not None:
            updates["first_name"] = sanitize_string(data.firstName)
        if data.lastName is not None:
            updates["last_name"] = sanitize_string(data.lastName)
        if data.phone is not None:
            updates["phone"] = data.phone
        if data.profilePicture is not None:
            updates["profile_picture"] = data.profilePicture
        if data.bio is not None:
            updates["bio"] = sanitize_string(data.bio)
        if data.hourlyRate is not None:
            updates["hourly_rate"] = data.hourlyRate

        return self.repo.update_user(self.db, user, **updates)

    def delete_user(self, user_id: int) -> dict:
        user = self.get_user(user_id)
        self.repo.delete_user(self.db, user)
        logger.info(f"🗑️ User {user_id} deleted")
        return {"message": "User deleted successfully"}
