"""
Booking status transitions.

Terminal statuses (COMPLETED, CANCELLED) cannot move to any other status.
Every other transition is permitted; re-applying the current status is a
no-op and always allowed.
"""

from ...models import BookingStatus

TERMINAL_STATUSES = frozenset({BookingStatus.COMPLETED, BookingStatus.CANCELLED})

# Statuses that hold a sitter's time slot
ACTIVE_STATUSES = (BookingStatus.PENDING, BookingStatus.CONFIRMED, BookingStatus.IN_PROGRESS)


class InvalidStatusTransition(ValueError):
    def __init__(self, current: BookingStatus, requested: BookingStatus):
        self.current = current
        self.requested = requested
        super().__init__(
            f"Cannot change booking status from {current.value} to {requested.value}"
        )


def can_transition(current: BookingStatus, requested: BookingStatus) -> bool:
    if current == requested:
        return True
    return current not in TERMINAL_STATUSES


def ensure_transition(current: BookingStatus, requested: BookingStatus) -> None:
    if not can_transition(current, requested):
        raise InvalidStatusTransition(current, requested)
