"""User repository - Database operations for users"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import User, UserRole


class UserRepository:
    """Repository for user database operations"""

    @staticmethod
    def get_users(db: Session, role: Optional[UserRole] = None) -> list[User]:
        """Get all users, optionally filtered by role"""
        query = db.query(User)
        if role is not None:
            query = query.filter(User.role == role)
        return query.order_by(User.created_at.desc(), User.id.desc()).all()

    @staticmethod
    def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
        """Get a specific user by ID"""
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def get_user_by_email(db: Session, email: str) -> Optional[User]:
        """Get a user by (lower-cased) email"""
        return db.query(User).filter(User.email == email.lower()).first()

    @staticmethod
    def create_user(db: Session, **user_data) -> User:
        """Create a new user. Raises IntegrityError on duplicate email."""
        user = User(**user_data)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    @staticmethod
    def update_user(db: Session, user: User, **updates) -> User:
        """Update a user with provided fields"""
        for key, value in updates.items():
            if value is not None and hasattr(user, key):
                setattr(user, key, value)

        db.commit()
        db.refresh(user)
        return user

    @staticmethod
    def delete_user(db: Session, user: User) -> None:
        """Delete a user"""
        db.delete(user)
        db.commit()
