"""Search repository - Case-insensitive text lookups across users, pets and bookings"""

from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload, selectinload

from ...models import Booking, Pet, User, UserRole


def _contains(term: str) -> str:
    """LIKE pattern matching `term` anywhere, with wildcards in the term escaped"""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SearchRepository:
    """Repository for search queries"""

    @staticmethod
    def _name_matches(term: str):
        pattern = _contains(term)
        return or_(
            User.first_name.ilike(pattern, escape="\\"),
            User.last_name.ilike(pattern, escape="\\"),
        )

    @staticmethod
    def search_sitters(
        db: Session,
        query: Optional[str] = None,
        location: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[User]:
        """Sitters whose first or last name contains each given term"""
        q = db.query(User).options(
            selectinload(User.bookings_as_sitter).selectinload(Booking.reviews)
        )
        q = q.filter(User.role == UserRole.SITTER)
        for term in (query, location):
            if term:
                q = q.filter(SearchRepository._name_matches(term))
        q = q.order_by(User.id)
        if limit is not None:
            q = q.limit(limit)
        return q.all()

    @staticmethod
    def search_pets(db: Session, query: str, limit: int) -> list[Pet]:
        """Pets whose name or breed contains `query`"""
        pattern = _contains(query)
        return (
            db.query(Pet)
            .options(joinedload(Pet.owner))
            .filter(
                or_(Pet.name.ilike(pattern, escape="\\"), Pet.breed.ilike(pattern, escape="\\"))
            )
            .order_by(Pet.id)
            .limit(limit)
            .all()
        )

    @staticmethod
    def search_bookings(db: Session, query: str, limit: int) -> list[Booking]:
        """Bookings whose special instructions contain `query`"""
        return (
            db.query(Booking)
            .options(
                joinedload(Booking.owner),
                joinedload(Booking.sitter),
                selectinload(Booking.pets),
            )
            .filter(Booking.special_instructions.ilike(_contains(query), escape="\\"))
            .order_by(Booking.created_at.desc(), Booking.id.desc())
            .limit(limit)
            .all()
        )

    @staticmethod
    def suggest_sitters(db: Session, query: str, limit: int) -> list[User]:
        return (
            db.query(User)
            .filter(User.role == UserRole.SITTER, SearchRepository._name_matches(query))
            .order_by(User.id)
            .limit(limit)
            .all()
        )
