"""
Data models for the pricing engine.

Uses dataclasses for structured, type-safe data representation.
"""
from dataclasses import dataclass, field, asdict
from datetime import date, datetime
from typing import Any, Mapping, Optional, Union

DateLike = Union[date, datetime, str]


@dataclass(frozen=True)
class Region:
    """Operational region with a multiplicative price factor."""
    key: str
    label: str
    factor: float


@dataclass(frozen=True)
class ServiceLevel:
    """Maintenance/service package applied to every daily rate."""
    key: str
    label: str
    description: str
    multiplier: float


@dataclass(frozen=True)
class InsuranceTier:
    """Insurance cover, charged per asset per day."""
    key: str
    label: str
    per_day: float


@dataclass(frozen=True)
class DeliveryMode:
    """Delivery option, charged once per asset."""
    key: str
    label: str
    per_asset: float


@dataclass(frozen=True)
class VehicleType:
    """A rentable vehicle type and its base daily rate."""
    key: str
    label: str
    base: float
    category: str  # "truck", "specialized" or "trailer"


@dataclass
class TraceStep:
    """A single step in the pricing resolution trace."""
    step: str
    description: str
    value: Optional[str] = None


# Accepted spellings for each request field (snake_case and the form's camelCase)
_REQUEST_FIELDS = {
    'region_key': ('region_key', 'regionKey', 'region'),
    'service_key': ('service_key', 'serviceKey', 'service'),
    'insurance_key': ('insurance_key', 'insuranceKey', 'insurance'),
    'delivery_key': ('delivery_key', 'deliveryKey', 'delivery'),
    'vehicles': ('vehicles',),
    'start_date': ('start_date', 'startDate'),
    'end_date': ('end_date', 'endDate'),
}


@dataclass(frozen=True)
class QuoteRequest:
    """
    The selections made in the fleet builder form.

    Every field is optional. Keys that do not match a reference table and
    quantities that do not parse are resolved by the engine, never rejected here.
    """
    region_key: Optional[Any] = None
    service_key: Optional[Any] = None
    insurance_key: Optional[Any] = None
    delivery_key: Optional[Any] = None
    vehicles: Mapping[Any, Any] = field(default_factory=dict)  # vehicle key → quantity
    start_date: Optional[DateLike] = None
    end_date: Optional[DateLike] = None

    @classmethod
    def from_dict(cls, payload: Any) -> 'QuoteRequest':
        """Build a request from a loosely-shaped mapping (e.g. a JSON body)."""
        if not isinstance(payload, Mapping):
            return cls()

        values = {}
        for name, aliases in _REQUEST_FIELDS.items():
            for alias in aliases:
                if alias in payload:
                    values[name] = payload[alias]
                    break

        vehicles = values.get('vehicles')
        values['vehicles'] = dict(vehicles) if isinstance(vehicles, Mapping) else {}
        return cls(**values)


@dataclass
class LineItem:
    """The priced contribution of one vehicle type within a quote."""
    key: str
    label: str
    quantity: int
    base_rate: float  # effective daily rate after region and service multipliers
    rental: float = 0.0
    insurance: float = 0.0
    delivery: float = 0.0
    trace: list[TraceStep] = field(default_factory=list)

    @property
    def line_total(self) -> float:
        return self.rental + self.insurance + self.delivery

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the trace for this line item."""
        self.trace.append(TraceStep(step=step, description=description, value=value))


@dataclass
class QuoteBreakdown:
    """Complete result of a quote calculation."""
    region: str
    service: str
    insurance: str
    delivery: str
    total_days: int
    lines: list[LineItem] = field(default_factory=list)

    rental_total: float = 0.0
    insurance_total: float = 0.0
    delivery_total: float = 0.0

    discount_rate: float = 0.0
    discount: float = 0.0
    subtotal: float = 0.0
    total: float = 0.0

    warnings: list[str] = field(default_factory=list)
    trace: list[TraceStep] = field(default_factory=list)

    @property
    def asset_count(self) -> int:
        """Total number of assets across all lines."""
        return sum(line.quantity for line in self.lines)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the result-level trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def add_warning(self, warning: str):
        """Add a result-level warning."""
        if warning not in self.warnings:
            self.warnings.append(warning)

    def get_trace_text(self) -> str:
        """Get human-readable result trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"• {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"• {t.step}: {t.description}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Plain dict of the breakdown, safe to serialize as JSON."""
        data = asdict(self)
        data['asset_count'] = self.asset_count
        for line, line_data in zip(self.lines, data['lines']):
            line_data['line_total'] = line.line_total
        return data
