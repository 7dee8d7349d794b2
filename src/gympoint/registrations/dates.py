"""Date and price arithmetic for registrations.

All datetimes handled here are naive and expressed in UTC.
"""

from __future__ import annotations

import calendar
from datetime import UTC, datetime
from decimal import Decimal

END_DATE_FORMAT = "%d/%m/%Y"


def utc_now() -> datetime:
    """Current time as a naive UTC datetime."""
    return datetime.now(UTC).replace(tzinfo=None)


def to_utc_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def start_of_hour(value: datetime) -> datetime:
    return value.replace(minute=0, second=0, microsecond=0)


def add_months(start: datetime, months: int) -> datetime:
    """Add whole calendar months, keeping the time of day.

    The day is clamped to the length of the target month
    (e.g., Jan 31 + 1 month => Feb 28/29).
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return start.replace(year=year, month=month, day=min(start.day, last_day))


def total_price(monthly_price: Decimal, duration: int) -> Decimal:
    return Decimal(monthly_price) * duration


def format_end_date(value: datetime) -> str:
    """Human-readable end date used in notification e-mails (dd/mm/yyyy)."""
    return value.strftime(END_DATE_FORMAT)
