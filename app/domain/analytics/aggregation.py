"""
Analytics aggregation - pure report building over in-memory collections.

Nothing in this module touches the database. Callers pass collections that
were already loaded (ORM rows or any objects exposing the same attributes)
and get plain dicts back, keyed the way the JSON responses are.

Every percentage and mean is guarded explicitly so an empty collection
reports 0 rather than failing on a zero division.

Unknown booking statuses, pet types and user roles raise ValueError instead
of being dropped: a value outside the enum means the input is malformed.
"""

import math
from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import Any, Optional, Union

BOOKING_STATUSES = ("PENDING", "CONFIRMED", "IN_PROGRESS", "COMPLETED", "CANCELLED")
OTHER_PET_TYPES = frozenset({"BIRD", "FISH", "OTHER"})
KNOWN_PET_TYPES = frozenset({"DOG", "CAT"}) | OTHER_PET_TYPES
KNOWN_ROLES = frozenset({"OWNER", "SITTER"})

Number = Union[int, float, Decimal]


def _enum_value(value: Any) -> Any:
    """Accept enum members and raw strings alike"""
    return getattr(value, "value", value)


def round_tenths(value: float) -> float:
    """Round to one decimal place, halves away from zero.

    Python's round() uses banker's rounding (round(0.25, 1) == 0.2), which
    differs from the reported figures, so the tenths digit is rounded by hand.
    """
    if value < 0:
        return -math.floor(-value * 10 + 0.5) / 10
    return math.floor(value * 10 + 0.5) / 10


def _percentage(part: int, whole: int) -> float:
    return part / whole * 100 if whole > 0 else 0


def dashboard_summary(
    counts: dict[str, int],
    completed: int,
    pending: int,
    paid_sum: Optional[Number],
) -> dict:
    """Headline dashboard figures from pre-computed counts.

    `counts` carries the totals for users, bookings, pets, payments and
    reviews. `paid_sum` is the sum of PAID payment amounts, None when there
    are none.
    """
    total_bookings = counts["bookings"]
    return {
        "totalUsers": counts["users"],
        "totalBookings": total_bookings,
        "totalPets": counts["pets"],
        "totalPayments": counts["payments"],
        "totalReviews": counts["reviews"],
        "completedBookings": completed,
        "pendingBookings": pending,
        "totalRevenue": float(paid_sum) if paid_sum else 0,
        "completionRate": completed / total_bookings * 100 if total_bookings > 0 else 0,
    }


def status_histogram(bookings: Iterable[Any]) -> dict[str, int]:
    """Count bookings per status; all five statuses are always present"""
    counts = {status: 0 for status in BOOKING_STATUSES}
    for booking in bookings:
        status = _enum_value(booking.status)
        if status not in counts:
            raise ValueError(f"Unknown booking status: {status!r}")
        counts[status] += 1
    return counts


def average_rating(ratings: Sequence[int]) -> dict:
    if not ratings:
        return {"averageRating": 0, "totalReviews": 0}

    return {
        "averageRating": round_tenths(sum(ratings) / len(ratings)),
        "totalReviews": len(ratings),
    }


def _booking_mean_rating(booking: Any) -> float:
    reviews = booking.reviews
    if not reviews:
        return 0
    return sum(review.rating for review in reviews) / len(reviews)


def sitter_stats(sitter: Any) -> dict:
    """Booking and review statistics for one sitter.

    averageRating is a mean of per-booking means: each booking contributes
    its own average (0 when unreviewed) regardless of how many reviews it
    has, and the total is divided by the number of bookings.
    """
    bookings = sitter.bookings_as_sitter
    total_bookings = len(bookings)
    completed_bookings = sum(1 for b in bookings if _enum_value(b.status) == "COMPLETED")
    total_reviews = sum(len(b.reviews) for b in bookings)
    rating_sum = sum(_booking_mean_rating(b) for b in bookings)

    return {
        "id": sitter.id,
        "firstName": sitter.first_name,
        "lastName": sitter.last_name,
        "email": sitter.email,
        "totalBookings": total_bookings,
        "completedBookings": completed_bookings,
        "totalReviews": total_reviews,
        "averageRating": round_tenths(rating_sum / max(total_bookings, 1)),
        "completionRate": _percentage(completed_bookings, total_bookings),
    }


def top_sitters(sitters: Sequence[Any], limit: int = 10) -> list[dict]:
    """Leaderboard of sitters by completed bookings, most first.

    The sort is stable, so sitters with equal completed counts keep their
    input order. A non-positive limit yields an empty list.
    """
    if limit <= 0:
        return []

    stats = [sitter_stats(sitter) for sitter in sitters]
    ranked = sorted(stats, key=lambda s: s["completedBookings"], reverse=True)
    return ranked[:limit]


def pet_type_breakdown(pets: Iterable[Any]) -> dict:
    dogs = cats = others = 0
    for pet in pets:
        pet_type = _enum_value(pet.type)
        if pet_type not in KNOWN_PET_TYPES:
            raise ValueError(f"Unknown pet type: {pet_type!r}")
        if pet_type == "DOG":
            dogs += 1
        elif pet_type == "CAT":
            cats += 1
        else:
            others += 1

    total = dogs + cats + others
    return {
        "total": total,
        "dogs": dogs,
        "cats": cats,
        "others": others,
        "dogPercentage": _percentage(dogs, total),
        "catPercentage": _percentage(cats, total),
        "otherPercentage": _percentage(others, total),
    }


def user_role_breakdown(users: Iterable[Any]) -> dict:
    owners = sitters = 0
    total = 0
    for user in users:
        total += 1
        role = _enum_value(user.role)
        if role not in KNOWN_ROLES:
            raise ValueError(f"Unknown user role: {role!r}")
        if role == "OWNER":
            owners += 1
        else:
            sitters += 1

    return {
        "totalUsers": total,
        "owners": owners,
        "sitters": sitters,
        "ownerPercentage": _percentage(owners, total),
        "sitterPercentage": _percentage(sitters, total),
    }


def revenue_summary(amounts: Sequence[Number]) -> dict:
    total = sum((Decimal(str(amount)) for amount in amounts), Decimal("0"))
    count = len(amounts)
    return {
        "totalRevenue": float(total),
        "averagePayment": float(total / count) if count > 0 else 0,
        "totalPayments": count,
    }
