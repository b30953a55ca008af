"""Review service - Business logic for review operations"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...metrics import BusinessMetrics
from ...models import Review
from ...services.notification_service import NotificationDispatcher
from ...utils.sanitization import sanitize_string
from ..analytics.aggregation import average_rating
from .repository import ReviewRepository
from .schemas import ReviewCreate, ReviewUpdate

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


def validate_rating(rating: int) -> None:
    if rating < MIN_RATING or rating > MAX_RATING:
        raise HTTPException(
            status_code=400, detail=f"Rating must be between {MIN_RATING} and {MAX_RATING}"
        )


class ReviewService:
    """Service layer for review business logic"""

    def __init__(
        self,
        db: Session,
        notifier: Optional[NotificationDispatcher] = None,
        metrics: Optional[BusinessMetrics] = None,
    ):
        self.db = db
        self.repo = ReviewRepository()
        self.notifier = notifier or NotificationDispatcher(db)
        self.metrics = metrics or BusinessMetrics()

    def get_reviews(self) -> list[Review]:
        return self.repo.get_reviews(self.db)

    def get_reviews_by_booking(self, booking_id: int) -> list[Review]:
        return self.repo.get_reviews(self.db, booking_id=booking_id)

    def get_reviews_by_sitter(self, sitter_id: int) -> list[Review]:
        return self.repo.get_reviews_by_sitter(self.db, sitter_id)

    def get_review(self, review_id: int) -> Review:
        review = self.repo.get_review_by_id(self.db, review_id)
        if not review:
            raise HTTPException(status_code=404, detail="Review not found")
        return review

    def get_average_rating(self, sitter_id: int) -> dict:
        """Flat mean over every review on the sitter's bookings"""
        return average_rating(self.repo.get_ratings_by_sitter(self.db, sitter_id))

    def create_review(self, data: ReviewCreate) -> Review:
        if not self.repo.get_booking_by_id(self.db, data.bookingId):
            raise HTTPException(status_code=400, detail="Booking not found")
        if not self.repo.get_user_by_id(self.db, data.reviewerId):
            raise HTTPException(status_code=400, detail="Reviewer not found")
        if not self.repo.get_user_by_id(self.db, data.reviewedUserId):
            raise HTTPException(status_code=400, detail="Reviewed user not found")
        validate_rating(data.rating)

        try:
            review = self.repo.create_review(
                self.db,
                booking_id=data.bookingId,
                reviewer_id=data.reviewerId,
                reviewed_user_id=data.reviewedUserId,
                rating=data.rating,
                comment=sanitize_string(data.comment),
            )
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(status_code=400, detail="Review already exists for this booking")

        logger.info(f"⭐ Review {review.id} ({review.rating}) created for booking {review.booking_id}")
        self._refresh_user_rating(review.reviewed_user_id)
        self.metrics.record_review(review.rating)
        self.notifier.review_received(review)
        return review

    def update_review(self, review_id: int, data: ReviewUpdate) -> Review:
        if data.rating is not None:
            validate_rating(data.rating)
        review = self.get_review(review_id)

        updates = {"rating": data.rating, "comment": sanitize_string(data.comment)}
        review = self.repo.update_review(self.db, review, **updates)
        if data.rating is not None:
            self._refresh_user_rating(review.reviewed_user_id)
        return review

    def delete_review(self, review_id: int) -> dict:
        review = self.get_review(review_id)
        reviewed_user_id = review.reviewed_user_id
        self.repo.delete_review(self.db, review)
        self._refresh_user_rating(reviewed_user_id)
        return {"message": "Review deleted successfully"}

    def _refresh_user_rating(self, user_id: int) -> None:
        user = self.repo.get_user_by_id(self.db, user_id)
        if not user:
            return
        summary = average_rating(self.repo.get_ratings_for_user(self.db, user_id))
        self.repo.update_user_rating(
            self.db, user, summary["averageRating"], summary["totalReviews"]
        )
