"""Presentation helpers - currency formatting and tabular views."""
from .currency import format_eur
from .frames import breakdown_frame, catalog_frame, display_totals

__all__ = ['format_eur', 'breakdown_frame', 'catalog_frame', 'display_totals']
