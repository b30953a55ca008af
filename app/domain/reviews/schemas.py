"""Review domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..users.schemas import UserSummary


class ReviewCreate(BaseModel):
    """Schema for reviewing a booking.

    `rating` is range-checked by the service so the error reads the same for
    create and update.
    """

    bookingId: int
    reviewerId: int
    reviewedUserId: int
    rating: int
    comment: Optional[str] = None


class ReviewUpdate(BaseModel):
    rating: Optional[int] = None
    comment: Optional[str] = None


class ReviewResponse(BaseModel):
    """Schema for review response"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    bookingId: int = Field(validation_alias="booking_id")
    reviewerId: int = Field(validation_alias="reviewer_id")
    reviewedUserId: int = Field(validation_alias="reviewed_user_id")
    rating: int
    comment: Optional[str] = None
    reviewer: Optional[UserSummary] = None
    createdAt: Optional[datetime] = Field(None, validation_alias="created_at")


class AverageRatingResponse(BaseModel):
    averageRating: float
    totalReviews: int
