"""Review repository - Database operations for reviews"""

from typing import Optional

from sqlalchemy.orm import Session, joinedload

from ...models import Booking, Review, User


class ReviewRepository:
    """Repository for review database operations"""

    @staticmethod
    def get_reviews(db: Session, booking_id: Optional[int] = None) -> list[Review]:
        """Get reviews, optionally for one booking, newest first"""
        query = db.query(Review).options(joinedload(Review.reviewer))
        if booking_id is not None:
            query = query.filter(Review.booking_id == booking_id)
        return query.order_by(Review.created_at.desc(), Review.id.desc()).all()

    @staticmethod
    def get_reviews_by_sitter(db: Session, sitter_id: int) -> list[Review]:
        """Get reviews left on bookings the sitter worked"""
        return (
            db.query(Review)
            .join(Booking, Review.booking_id == Booking.id)
            .options(joinedload(Review.reviewer))
            .filter(Booking.sitter_id == sitter_id)
            .order_by(Review.created_at.desc(), Review.id.desc())
            .all()
        )

    @staticmethod
    def get_ratings_by_sitter(db: Session, sitter_id: int) -> list[int]:
        """Get only the rating values for a sitter's bookings"""
        rows = (
            db.query(Review.rating)
            .join(Booking, Review.booking_id == Booking.id)
            .filter(Booking.sitter_id == sitter_id)
            .all()
        )
        return [row.rating for row in rows]

    @staticmethod
    def get_ratings_for_user(db: Session, user_id: int) -> list[int]:
        """Get the rating values of every review about a user"""
        rows = db.query(Review.rating).filter(Review.reviewed_user_id == user_id).all()
        return [row.rating for row in rows]

    @staticmethod
    def get_review_by_id(db: Session, review_id: int) -> Optional[Review]:
        """Get a specific review by ID"""
        return (
            db.query(Review)
            .options(joinedload(Review.reviewer))
            .filter(Review.id == review_id)
            .first()
        )

    @staticmethod
    def get_booking_by_id(db: Session, booking_id: int) -> Optional[Booking]:
        return db.query(Booking).filter(Booking.id == booking_id).first()

    @staticmethod
    def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def create_review(db: Session, **review_data) -> Review:
        """Insert a review. Raises IntegrityError on a duplicate (booking, reviewer)."""
        review = Review(**review_data)
        db.add(review)
        db.commit()
        db.refresh(review)
        return review

    @staticmethod
    def update_review(db: Session, review: Review, **updates) -> Review:
        """Update a review with provided fields"""
        for key, value in updates.items():
            if value is not None and hasattr(review, key):
                setattr(review, key, value)

        db.commit()
        db.refresh(review)
        return review

    @staticmethod
    def delete_review(db: Session, review: Review) -> None:
        db.delete(review)
        db.commit()

    @staticmethod
    def update_user_rating(db: Session, user: User, rating: float, review_count: int) -> User:
        """Store a user's recomputed rating and review count"""
        user.rating = rating
        user.review_count = review_count
        db.commit()
        db.refresh(user)
        return user
