"""Shared engine instance for the API."""
from ..engine import PricingEngine

engine = PricingEngine()
