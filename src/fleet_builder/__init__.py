"""
Fleet Builder Package

Quote pricing for vehicle-rental fleets configured through the Fleet Builder form.
Resolves Region → Service → Insurance → Delivery selections into an itemized
price breakdown with duration-based discounts.
"""

__version__ = "1.0.0"
