"""
Rental period arithmetic: inclusive day counts and duration discount tiers.
"""
import math
from datetime import datetime
from typing import Any, Optional

from .inputs import parse_date

SECONDS_PER_DAY = 24 * 60 * 60

# (minimum days, discount rate), longest first
DISCOUNT_TIERS = (
    (180, 0.12),
    (90, 0.07),
    (30, 0.03),
)


def days_between(start: Optional[datetime], end: Optional[datetime]) -> int:
    """
    Inclusive number of rental days from ``start`` to ``end``.

    The calendar difference is rounded up to whole days and 1 is added, so a
    same-day booking counts as 1 day. An end before the start gives 0.
    Returns 0 when either bound is missing.
    """
    if start is None or end is None:
        return 0
    raw = math.ceil((end - start).total_seconds() / SECONDS_PER_DAY) + 1
    return max(0, raw)


def rental_days(start_date: Any, end_date: Any, default_days: int = 30) -> int:
    """
    Total days to price a request for.

    A missing or unparseable date uses ``default_days``. A present but
    inverted range is not defaulted: it prices as 0 days.
    """
    start = parse_date(start_date)
    end = parse_date(end_date)
    if start is None or end is None:
        return default_days
    return days_between(start, end)


def duration_discount_rate(total_days: int) -> float:
    """Discount rate for a rental of ``total_days`` days."""
    for min_days, rate in DISCOUNT_TIERS:
        if total_days >= min_days:
            return rate
    return 0.0
