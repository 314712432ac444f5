"""Engine subpackage - core pricing logic and reference data."""
from .pricing_engine import PricingEngine, calculate_price
from .models import QuoteRequest, LineItem, QuoteBreakdown

__all__ = ['PricingEngine', 'calculate_price', 'QuoteRequest', 'LineItem', 'QuoteBreakdown']
