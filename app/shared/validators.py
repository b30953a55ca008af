"""Shared validation utilities"""

import re
from datetime import datetime, timezone
from typing import Optional

EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"


def validate_email(email: Optional[str]) -> Optional[str]:
    """
    Validate email format.

    Args:
        email: Email address string

    Returns:
        Lowercase email address

    Raises:
        ValueError: If email format is invalid
    """
    if not email:
        return email

    email = email.strip().lower()

    if not re.match(EMAIL_PATTERN, email):
        raise ValueError("Invalid email format")

    return email


def validate_phone(phone: Optional[str]) -> Optional[str]:
    """
    Normalize a phone number to E.164.

    Ten-digit numbers are treated as North American and get a +1 prefix;
    anything else must already carry its country code (8-15 digits).

    Raises:
        ValueError: If the phone number cannot be normalized
    """
    if not phone:
        return phone

    has_plus = phone.strip().startswith("+")
    digits = re.sub(r"\D", "", phone)

    if not has_plus and len(digits) == 10:
        return f"+1{digits}"

    if not 8 <= len(digits) <= 15:
        raise ValueError("Phone number must contain 8 to 15 digits")

    return f"+{digits}"


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert timezone-aware datetimes to naive UTC, the storage convention"""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def validate_date_range(start: Optional[datetime], end: Optional[datetime]) -> None:
    """Raise ValueError when both bounds are given and start is after end"""
    if start is not None and end is not None and start > end:
        raise ValueError("startDate must be before endDate")


def utc_now() -> datetime:
    """Current time as naive UTC"""
    return datetime.now(timezone.utc).replace(tzinfo=None)
