"""
Tabular views of quotes and the vehicle catalog as pandas DataFrames.
"""
import pandas as pd
from typing import Any, Optional

from ..engine.models import QuoteBreakdown
from ..engine import reference
from .currency import format_eur

LINE_COLUMNS = ['Key', 'Vehicle', 'Quantity', 'Daily Rate', 'Rental', 'Insurance', 'Delivery', 'Line Total']


def breakdown_frame(breakdown: QuoteBreakdown) -> pd.DataFrame:
    """One row per line item, in request order."""
    rows = [
        {
            'Key': line.key,
            'Vehicle': line.label,
            'Quantity': line.quantity,
            'Daily Rate': line.base_rate,
            'Rental': line.rental,
            'Insurance': line.insurance,
            'Delivery': line.delivery,
            'Line Total': line.line_total,
        }
        for line in breakdown.lines
    ]
    return pd.DataFrame(rows, columns=LINE_COLUMNS)


def catalog_frame(region_key: Optional[Any] = None, service_key: Optional[Any] = None) -> pd.DataFrame:
    """
    Vehicle catalog indexed by key, with the effective daily rate for the
    given region and service level (defaults when unrecognized).
    """
    region = reference.lookup(reference.REGIONS, region_key, reference.DEFAULT_REGION)
    service = reference.lookup(reference.SERVICE_LEVELS, service_key, reference.DEFAULT_SERVICE_LEVEL)

    df = pd.DataFrame(
        [
            {
                'Key': v.key,
                'Label': v.label,
                'Category': v.category,
                'Base Rate': float(v.base),
            }
            for v in reference.VEHICLE_TYPES
        ]
    ).set_index('Key')
    df['Daily Rate'] = df['Base Rate'] * region.factor * service.multiplier
    return df


def display_totals(breakdown: QuoteBreakdown) -> dict[str, str]:
    """Formatted summary figures for a quote."""
    return {
        'duration': f"{breakdown.total_days} days",
        'assets': f"{breakdown.asset_count} total",
        'rental': format_eur(breakdown.rental_total),
        'insurance': format_eur(breakdown.insurance_total),
        'delivery': format_eur(breakdown.delivery_total),
        'subtotal': format_eur(breakdown.subtotal),
        'discount': format_eur(breakdown.discount),
        'discount_rate': f"{breakdown.discount_rate:.0%}",
        'total': format_eur(breakdown.total),
    }
