"""
Coercion of raw form values into the types the engine prices with.

Nothing here raises on bad input: unparseable values come back as 0 or None.
"""
import math
import re
from datetime import date, datetime, timezone
from typing import Any, Optional

# Leading ASCII integer, optionally signed, after leading whitespace ("12abc" → 12, "3.7" → 3)
_LEADING_INT = re.compile(r"^\s*([+-]?)([0-9]+)")


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp ``value`` into [minimum, maximum]; non-finite values count as 0."""
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        value = 0
    return min(max(value, minimum), maximum)


def parse_quantity(value: Any, maximum: int = 999_999_999) -> int:
    """
    Parse a requested quantity.

    The textual form of ``value`` is read up to the first non-digit, so
    fractional quantities truncate. Anything without a leading integer
    (None, "", "abc", True) counts as 0. Only ASCII digits count. Integers
    are clamped directly; the result is always in [0, maximum].
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return min(max(value, 0), maximum)

    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    # More significant digits than the maximum has means the value exceeds it
    if len(digits) > len(str(maximum)):
        return 0 if sign == "-" else maximum
    return int(clamp(int(sign + digits), 0, maximum))


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse a date-like value into a naive datetime.

    Accepts date, datetime and ISO-8601 strings ("2025-03-01",
    "2025-03-01T08:00Z"). Missing or unparseable values return None.
    Aware datetimes are converted to UTC before dropping the offset.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text[-1] in "Zz":
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        except (OverflowError, ValueError):
            return None
    return parsed