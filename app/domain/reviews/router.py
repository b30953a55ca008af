"""Review router - FastAPI endpoints for review operations"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ...metrics import BusinessMetrics, get_metrics
from ...services.notification_service import (
    NotificationDispatcher,
    NotificationTransport,
    get_notification_transport,
)
from .schemas import AverageRatingResponse, ReviewCreate, ReviewResponse, ReviewUpdate
from .service import ReviewService

router = APIRouter(prefix="/reviews", tags=["Reviews"])


def get_review_service(
    db: Session = Depends(get_db),
    transport: NotificationTransport = Depends(get_notification_transport),
    metrics: BusinessMetrics = Depends(get_metrics),
) -> ReviewService:
    """Dependency injection for ReviewService"""
    return ReviewService(db, NotificationDispatcher(db, transport), metrics)


@router.get("", response_model=list[ReviewResponse])
def list_reviews(service: ReviewService = Depends(get_review_service)):
    return service.get_reviews()


@router.get("/booking/{booking_id}", response_model=list[ReviewResponse])
def list_reviews_by_booking(booking_id: int, service: ReviewService = Depends(get_review_service)):
    return service.get_reviews_by_booking(booking_id)


@router.get("/sitter/{sitter_id}", response_model=list[ReviewResponse])
def list_reviews_by_sitter(sitter_id: int, service: ReviewService = Depends(get_review_service)):
    return service.get_reviews_by_sitter(sitter_id)


@router.get("/sitter/{sitter_id}/average-rating", response_model=AverageRatingResponse)
def sitter_average_rating(sitter_id: int, service: ReviewService = Depends(get_review_service)):
    return service.get_average_rating(sitter_id)


@router.get("/{review_id}", response_model=ReviewResponse)
def get_review(review_id: int, service: ReviewService = Depends(get_review_service)):
    return service.get_review(review_id)


@router.post("", response_model=ReviewResponse, status_code=201)
def create_review(body: ReviewCreate, service: ReviewService = Depends(get_review_service)):
    return service.create_review(body)


@router.put("/{review_id}", response_model=ReviewResponse)
def update_review(
    review_id: int, body: ReviewUpdate, service: ReviewService = Depends(get_review_service)
):
    return service.update_review(review_id, body)


@router.delete("/{review_id}")
def delete_review(review_id: int, service: ReviewService = Depends(get_review_service)):
    return service.delete_review(review_id)
