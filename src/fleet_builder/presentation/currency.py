"""
Display formatting for euro amounts.

Amounts are shown the Dutch way: euro sign, a non-breaking space, dots as
thousands separators and no decimals ("€ 12.345").
"""
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

EURO_SIGN = "€"
NBSP = "\u00a0"


def format_eur(amount: Optional[float]) -> str:
    """Format ``amount`` as whole euros; None and non-finite values show as € 0."""
    if amount is None or not math.isfinite(amount):
        amount = 0

    whole = int(Decimal(repr(float(amount))).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    sign = "-" if whole < 0 else ""
    digits = f"{abs(whole):,}".replace(",", ".")
    return f"{EURO_SIGN}{NBSP}{sign}{digits}"
