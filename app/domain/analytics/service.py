"""Analytics service - Loads collections and hands them to the aggregation functions"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...config import DEFAULT_TOP_SITTERS_LIMIT, RECENT_USERS_LIMIT
from ...models import BookingStatus
from ...shared.validators import to_naive_utc, validate_date_range
from . import aggregation
from .repository import AnalyticsRepository

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Service layer for the analytics reports.

    Each report is built in two steps: the repository loads the rows, then a
    pure function from `aggregation` reduces them. Any failure in either step
    is logged and reported as a 500 naming the report.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = AnalyticsRepository()

    def _fail(self, report: str, error: Exception) -> HTTPException:
        logger.error(f"❌ Failed to build {report} report: {error}", exc_info=True)
        return HTTPException(status_code=500, detail=f"Failed to get {report}")

    @staticmethod
    def _date_range(start: Optional[datetime], end: Optional[datetime]):
        start, end = to_naive_utc(start), to_naive_utc(end)
        try:
            validate_date_range(start, end)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return start, end

    def get_dashboard(self) -> dict:
        try:
            counts = self.repo.get_entity_counts(self.db)
            completed = self.repo.count_bookings_by_status(self.db, BookingStatus.COMPLETED)
            pending = self.repo.count_bookings_by_status(self.db, BookingStatus.PENDING)
            paid_sum = self.repo.sum_paid_amounts(self.db)
            return aggregation.dashboard_summary(counts, completed, pending, paid_sum)
        except Exception as e:
            raise self._fail("dashboard stats", e)

    def get_booking_analytics(
        self, start_date: Optional[datetime] = None, end_date: Optional[datetime] = None
    ) -> dict:
        start, end = self._date_range(start_date, end_date)
        try:
            bookings = self.repo.get_bookings(self.db, start, end)
            return {
                "totalBookings": len(bookings),
                "statusCounts": aggregation.status_histogram(bookings),
                "bookings": bookings,
            }
        except Exception as e:
            raise self._fail("booking analytics", e)

    def get_user_analytics(self) -> dict:
        try:
            report = aggregation.user_role_breakdown(self.repo.get_users(self.db))
            report["recentUsers"] = self.repo.get_recent_users(self.db, RECENT_USERS_LIMIT)
            return report
        except Exception as e:
            raise self._fail("user analytics", e)

    def get_revenue_analytics(
        self, start_date: Optional[datetime] = None, end_date: Optional[datetime] = None
    ) -> dict:
        start, end = self._date_range(start_date, end_date)
        try:
            payments = self.repo.get_paid_payments(self.db, start, end)
            report = aggregation.revenue_summary([p.amount for p in payments])
            report["payments"] = payments
            return report
        except Exception as e:
            raise self._fail("revenue analytics", e)

    def get_top_sitters(self, limit: int = DEFAULT_TOP_SITTERS_LIMIT) -> list[dict]:
        try:
            if limit <= 0:
                return []
            sitters = self.repo.get_sitters_with_reviews(self.db)
            return aggregation.top_sitters(sitters, limit)
        except Exception as e:
            raise self._fail("top sitters", e)

    def get_pet_analytics(self) -> dict:
        try:
            return aggregation.pet_type_breakdown(self.repo.get_pets(self.db))
        except Exception as e:
            raise self._fail("pet analytics", e)
