"""
Business metrics for the marketplace.

Counters live on an explicitly constructed `BusinessMetrics` object that
the application stores on `app.state.metrics`; routers receive it through
the `get_metrics` dependency. Nothing here is a module-level singleton, so
tests can build their own instance and `reset()` restores a clean slate.
"""

import logging
import time
from collections import Counter
from decimal import Decimal
from typing import Optional

from fastapi import Request

logger = logging.getLogger(__name__)

RATING_BUCKETS = (1, 2, 3, 4, 5)


class BusinessMetrics:
    """In-process counters for bookings, payments and reviews"""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self.started_at = time.time()
        self.bookings_created = 0
        self.booking_transitions: Counter = Counter()
        self.payments_by_status: Counter = Counter()
        self.refunds = 0
        self.revenue_total = Decimal("0")
        self.reviews_submitted = 0
        self.rating_distribution: Counter = Counter({bucket: 0 for bucket in RATING_BUCKETS})

    def record_booking_created(self) -> None:
        self.bookings_created += 1

    def record_booking_transition(self, status: str) -> None:
        self.booking_transitions[status] += 1

    def record_payment(self, status: str, amount: Optional[Decimal] = None) -> None:
        self.payments_by_status[status] += 1
        if status == "PAID" and amount is not None:
            self.revenue_total += Decimal(str(amount))

    def record_refund(self, amount: Decimal) -> None:
        self.refunds += 1
        self.revenue_total -= Decimal(str(amount))

    def record_review(self, rating: int) -> None:
        self.reviews_submitted += 1
        self.rating_distribution[rating] += 1

    def snapshot(self) -> dict:
        return {
            "uptimeSeconds": round(time.time() - self.started_at, 2),
            "bookingsCreated": self.bookings_created,
            "bookingTransitions": dict(self.booking_transitions),
            "paymentsByStatus": dict(self.payments_by_status),
            "refunds": self.refunds,
            "revenueTotal": float(self.revenue_total),
            "reviewsSubmitted": self.reviews_submitted,
            "ratingDistribution": {str(k): v for k, v in sorted(self.rating_distribution.items())},
        }


def get_metrics(request: Request) -> BusinessMetrics:
    """Dependency returning the metrics object owned by the running app"""
    return request.app.state.metrics
