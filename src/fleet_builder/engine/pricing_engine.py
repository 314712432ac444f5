"""
Pricing Engine - Fleet quote calculation with traceability.

Resolves a QuoteRequest into a QuoteBreakdown:
- Reference-table lookups with fallback to the basic tier
- Inclusive rental-day count with a 30-day default
- Per-vehicle-type line items (rental, insurance, delivery)
- A single duration discount on the combined subtotal

The calculation never raises. Unrecognized selections degrade to defaults
and are reported as warnings on the breakdown.
"""
import logging
from typing import Any, Mapping, Optional, Union

from ..config.settings import get_settings, Settings
from .models import QuoteRequest, QuoteBreakdown, LineItem, Region, ServiceLevel, InsuranceTier, DeliveryMode
from .inputs import parse_quantity, parse_date
from .duration import rental_days, duration_discount_rate
from . import reference

logger = logging.getLogger(__name__)


class PricingEngine:
    """
    Stateless fleet pricing engine.

    Resolution order:
    1. Region, service level, insurance and delivery (fallback to defaults)
    2. Total rental days from the date range
    3. One line item per vehicle entry, in request order
    4. Duration discount on rental + insurance + delivery
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def _resolve(self, result: QuoteBreakdown, name: str, table, key: Any, default):
        """Look up ``key`` in ``table``, recording a warning when it falls back."""
        record = reference.find(table, key)
        if record is not None:
            result.add_trace(f"{name} Lookup", record.label, record.key)
            return record

        if key is not None and key != "":
            result.add_warning(f"Unknown {name.lower()} '{key}', using {default.label}")
            logger.debug("Unknown %s key %r, falling back to %s", name.lower(), key, default.key)
        result.add_trace(f"{name} Lookup", f"Using default {default.label}", default.key)
        return default

    def calculate(self, request: QuoteRequest) -> QuoteBreakdown:
        """
        Calculate a quote with full traceability.

        Args:
            request: QuoteRequest with selections, vehicles and date range

        Returns:
            QuoteBreakdown with lines, totals, trace and warnings
        """
        total_days = rental_days(
            request.start_date,
            request.end_date,
            default_days=self.settings.default_rental_days,
        )

        result = QuoteBreakdown(
            region=reference.DEFAULT_REGION.key,
            service=reference.DEFAULT_SERVICE_LEVEL.key,
            insurance=reference.DEFAULT_INSURANCE_TIER.key,
            delivery=reference.DEFAULT_DELIVERY_MODE.key,
            total_days=total_days,
        )

        region: Region = self._resolve(
            result, "Region", reference.REGIONS, request.region_key, reference.DEFAULT_REGION)
        service: ServiceLevel = self._resolve(
            result, "Service", reference.SERVICE_LEVELS, request.service_key, reference.DEFAULT_SERVICE_LEVEL)
        insurance: InsuranceTier = self._resolve(
            result, "Insurance", reference.INSURANCE_TIERS, request.insurance_key, reference.DEFAULT_INSURANCE_TIER)
        delivery: DeliveryMode = self._resolve(
            result, "Delivery", reference.DELIVERY_MODES, request.delivery_key, reference.DEFAULT_DELIVERY_MODE)

        result.region = region.key
        result.service = service.key
        result.insurance = insurance.key
        result.delivery = delivery.key

        if parse_date(request.start_date) is None or parse_date(request.end_date) is None:
            result.add_trace("Duration", "No complete date range, using default", f"{total_days} days")
        else:
            result.add_trace("Duration", "Inclusive day count", f"{total_days} days")

        vehicles = request.vehicles if isinstance(request.vehicles, Mapping) else {}
        for key, qty in vehicles.items():
            line = self._calculate_line(key, qty, total_days, region, service, insurance, delivery)
            if reference.find_vehicle_type(key) is None:
                result.add_warning(f"Unknown vehicle type '{key}', priced at 0")
            result.lines.append(line)
            result.rental_total += line.rental
            result.insurance_total += line.insurance
            result.delivery_total += line.delivery

        result.discount_rate = duration_discount_rate(total_days)
        result.subtotal = result.rental_total + result.insurance_total + result.delivery_total
        result.discount = result.subtotal * result.discount_rate
        result.total = max(0.0, result.subtotal - result.discount)

        result.add_trace("Subtotal", "Rental + insurance + delivery", f"{result.subtotal:.2f}")
        result.add_trace("Discount", f"Duration discount for {total_days} days", f"{result.discount_rate:.0%}")
        result.add_trace("Total", "Subtotal less discount", f"{result.total:.2f}")

        return result

    def _calculate_line(
        self,
        key: Any,
        qty: Any,
        total_days: int,
        region: Region,
        service: ServiceLevel,
        insurance: InsuranceTier,
        delivery: DeliveryMode,
    ) -> LineItem:
        """Calculate a single line item with trace."""
        vehicle = reference.find_vehicle_type(key)
        quantity = parse_quantity(qty, self.settings.max_quantity)
        base = (vehicle.base if vehicle else 0) * region.factor * service.multiplier

        line = LineItem(
            key=str(key),
            label=vehicle.label if vehicle else str(key),
            quantity=quantity,
            base_rate=base,
        )

        if vehicle:
            line.add_trace("Vehicle Lookup", vehicle.label, f"{vehicle.base:.2f}/day")
        else:
            line.add_trace("Vehicle Lookup", "Unknown vehicle type, base rate 0", str(key))
            logger.debug("Unknown vehicle type %r, pricing at 0", key)

        line.add_trace("Daily Rate", f"Base × {region.factor} × {service.multiplier}", f"{base:.2f}")

        line.rental = base * quantity * total_days
        line.insurance = insurance.per_day * quantity * total_days
        line.delivery = delivery.per_asset * quantity

        line.add_trace("Rental", f"{quantity} × {total_days} days × {base:.2f}", f"{line.rental:.2f}")
        line.add_trace("Insurance", f"{quantity} × {total_days} days × {insurance.per_day}", f"{line.insurance:.2f}")
        line.add_trace("Delivery", f"{quantity} × {delivery.per_asset}", f"{line.delivery:.2f}")

        return line


def calculate_price(
    request: Union[QuoteRequest, Mapping[str, Any]],
    settings: Optional[Settings] = None,
) -> QuoteBreakdown:
    """Price a request, given either as a QuoteRequest or a plain mapping."""
    if not isinstance(request, QuoteRequest):
        request = QuoteRequest.from_dict(request)
    return PricingEngine(settings).calculate(request)
