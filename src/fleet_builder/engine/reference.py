"""
Reference tables for fleet pricing.

Each table is an ordered tuple of frozen records. Lookups never fail: an
unrecognized key resolves to the table's named default.
"""
from typing import Any, Optional, Sequence, TypeVar

from .models import Region, ServiceLevel, InsuranceTier, DeliveryMode, VehicleType

T = TypeVar('T')


REGIONS = (
    Region(key="regional", label="Regional", factor=0.99),
    Region(key="national", label="National", factor=1.0),
    Region(key="international", label="International", factor=1.06),
)

SERVICE_LEVELS = (
    ServiceLevel(key="payg", label="Pay as you go",
                 description="Reactive maintenance, parts billed, no SLA", multiplier=1.0),
    ServiceLevel(key="smartcare", label="SmartCare (limited)",
                 description="PM plan + priority line, 24–48h response", multiplier=1.1),
    ServiceLevel(key="totalcare", label="TotalCare (full)",
                 description="Full service, courtesy vehicle, 8–24h SLA", multiplier=1.25),
)

INSURANCE_TIERS = (
    InsuranceTier(key="none", label="No insurance", per_day=0),
    InsuranceTier(key="essential", label="Essential coverage", per_day=6),
    InsuranceTier(key="full", label="Full coverage", per_day=12),
)

DELIVERY_MODES = (
    DeliveryMode(key="pickup", label="Pickup at depot", per_asset=0),
    DeliveryMode(key="delivered", label="Delivered (standard)", per_asset=150),
    DeliveryMode(key="express", label="Express delivery", per_asset=300),
)

VEHICLE_TYPES = (
    # Trucks & vans
    VehicleType(key="tractor_4x2", label="Tractor Unit 4x2", base=180, category="truck"),
    VehicleType(key="tractor_6x2", label="Tractor Unit 6x2", base=195, category="truck"),
    VehicleType(key="rigid", label="Rigid Truck", base=150, category="truck"),
    VehicleType(key="van", label="Van (L2H2)", base=90, category="truck"),
    # Specialized vehicles
    VehicleType(key="garbage", label="Garbage Truck", base=220, category="specialized"),
    VehicleType(key="cleaning_cart", label="Street Cleaning Cart", base=85, category="specialized"),
    # Trailers
    VehicleType(key="box", label="Box Trailer", base=55, category="trailer"),
    VehicleType(key="curtain", label="Curtain Sider Trailer", base=50, category="trailer"),
    VehicleType(key="reefer", label="Reefer Trailer", base=65, category="trailer"),
    VehicleType(key="flatbed", label="Flatbed Trailer", base=48, category="trailer"),
    VehicleType(key="double_decker", label="Double Decker Trailer", base=75, category="trailer"),
    VehicleType(key="chassis", label="Container Chassis", base=45, category="trailer"),
    VehicleType(key="kipper", label="Kipper Trailer", base=80, category="trailer"),
    VehicleType(key="tanker", label="Tanker Trailer", base=95, category="trailer"),
)

DEFAULT_REGION = REGIONS[1]
DEFAULT_SERVICE_LEVEL = SERVICE_LEVELS[0]
DEFAULT_INSURANCE_TIER = INSURANCE_TIERS[0]
DEFAULT_DELIVERY_MODE = DELIVERY_MODES[0]


def find(table: Sequence[T], key: Any) -> Optional[T]:
    """Return the record whose key equals ``key``, or None."""
    for record in table:
        if record.key == key:
            return record
    return None


def lookup(table: Sequence[T], key: Any, default: T) -> T:
    """Return the record for ``key``, falling back to ``default``."""
    record = find(table, key)
    return record if record is not None else default


def find_vehicle_type(key: Any) -> Optional[VehicleType]:
    return find(VEHICLE_TYPES, key)
