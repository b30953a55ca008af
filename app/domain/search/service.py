"""Search service - Business logic for marketplace search"""

import logging
from datetime import datetime, timezone

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...config import SEARCH_RESULT_LIMIT, SEARCH_SUGGESTION_LIMIT
from ...models import Booking, Pet, User
from ..analytics.aggregation import average_rating
from .repository import SearchRepository
from .schemas import SitterSearchRequest

logger = logging.getLogger(__name__)


class SearchService:
    """Service layer for search.

    Matching is a case-insensitive substring test; there is no index or
    fuzzy matching. Failures are logged and reported as a 500.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = SearchRepository()

    def _fail(self, action: str, error: Exception) -> HTTPException:
        logger.error(f"❌ Failed to {action}: {error}", exc_info=True)
        return HTTPException(status_code=500, detail=f"Failed to {action}")

    @staticmethod
    def _sitter_rating(sitter: User) -> dict:
        ratings = [
            review.rating for booking in sitter.bookings_as_sitter for review in booking.reviews
        ]
        return average_rating(ratings)

    def search_sitters(self, data: SitterSearchRequest) -> list[User]:
        """Sitters matching the name filters, optionally with a minimum mean rating.

        The rating threshold is applied to the mean of every review the sitter
        received across all bookings; sitters with no reviews never pass it.
        """
        try:
            if not data.rating:
                sitters = self.repo.search_sitters(
                    self.db, data.query, data.location, limit=SEARCH_RESULT_LIMIT
                )
            else:
                sitters = [
                    sitter
                    for sitter in self.repo.search_sitters(self.db, data.query, data.location)
                    if self._rating_at_least(sitter, data.rating)
                ][:SEARCH_RESULT_LIMIT]
        except Exception as e:
            raise self._fail("search sitters", e)

        logger.info(f"🔍 Sitter search returned {len(sitters)} results")
        return sitters

    def _rating_at_least(self, sitter: User, minimum: float) -> bool:
        summary = self._sitter_rating(sitter)
        return summary["totalReviews"] > 0 and summary["averageRating"] >= minimum

    def search_pets(self, query: str) -> list[Pet]:
        try:
            pets = self.repo.search_pets(self.db, query, SEARCH_RESULT_LIMIT)
        except Exception as e:
            raise self._fail("search pets", e)
        logger.info(f"🔍 Pet search for {query!r} returned {len(pets)} results")
        return pets

    def search_bookings(self, query: str) -> list[Booking]:
        try:
            bookings = self.repo.search_bookings(self.db, query, SEARCH_RESULT_LIMIT)
        except Exception as e:
            raise self._fail("search bookings", e)
        logger.info(f"🔍 Booking search for {query!r} returned {len(bookings)} results")
        return bookings

    def get_suggestions(self, query: str) -> dict:
        try:
            return {
                "sitters": self.repo.suggest_sitters(self.db, query, SEARCH_SUGGESTION_LIMIT),
                "pets": self.repo.search_pets(self.db, query, SEARCH_SUGGESTION_LIMIT),
            }
        except Exception as e:
            raise self._fail("get search suggestions", e)

    @staticmethod
    def get_status() -> dict:
        return {
            "searchEnabled": True,
            "indexingEnabled": False,
            "fuzzySearchEnabled": False,
            "resultLimit": SEARCH_RESULT_LIMIT,
            "suggestionLimit": SEARCH_SUGGESTION_LIMIT,
            "timestamp": datetime.now(timezone.utc),
        }
