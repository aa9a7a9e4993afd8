"""
Shipping Cost Calculator

Parcel in, cost out. The cost is a weight-bracketed base rate scaled by a
destination zone multiplier and a shipping speed multiplier:

    total = base_rate(billable_weight) * zone_multiplier * speed_multiplier

rounded half-to-even to whole cents.

RATE TABLES
-----------
    base_rates.csv  - weight brackets, lower exclusive / upper inclusive
    zones.csv       - zone code "1".."5" -> multiplier
    speeds.csv      - ShippingSpeed value -> multiplier

Tables are read once per process and held as Decimal.

USAGE
-----
    from parcel_estimator.calculate_costs import calculate_shipping_cost, ShippingSpeed
    cost = calculate_shipping_cost(parcel, "3", ShippingSpeed.EXPRESS)
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from functools import lru_cache

from .version import VERSION
from .data import (
    load_base_rates,
    load_zone_multipliers,
    load_speed_multipliers,
    COST_PLACES,
    COST_ROUNDING,
)
from .errors import ErrorKind, InvalidArgument, Result
from .parcel import Parcel

logger = logging.getLogger(__name__)

INVALID_ZONE_MESSAGE = "Invalid zone code. Must be 1-5"
INVALID_SPEED_MESSAGE = "Invalid shipping speed"


class ShippingSpeed(str, Enum):
    """Closed set of shipping speeds."""
    STANDARD = "Standard"
    EXPRESS = "Express"

    @classmethod
    def parse(cls, text: str | None) -> "ShippingSpeed":
        """
        Parse free text (case-insensitive, surrounding whitespace ignored).

        Raises:
            InvalidArgument: if text names no speed
        """
        if text is not None:
            wanted = str(text).strip().casefold()
            for speed in cls:
                if speed.value.casefold() == wanted:
                    return speed
        raise InvalidArgument(ErrorKind.INVALID_SPEED, INVALID_SPEED_MESSAGE)


@dataclass(frozen=True)
class ShippingQuote:
    """Breakdown of a single cost calculation."""
    parcel: Parcel
    zone: str
    speed: ShippingSpeed
    base_rate: Decimal
    zone_multiplier: Decimal
    speed_multiplier: Decimal
    subtotal: Decimal           # Unrounded product
    total: Decimal              # Rounded to COST_PLACES
    calculator_version: str = VERSION


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_shipping_cost(
    parcel: Parcel,
    zone_code: str,
    speed: ShippingSpeed | str,
) -> Decimal:
    """
    Calculate the shipping cost for a parcel.

    Args:
        parcel: Validated parcel
        zone_code: Destination zone code, "1".."5" (trimmed, case-insensitive)
        speed: ShippingSpeed, or its name as free text

    Returns:
        Total cost rounded to 2 decimal places (half-to-even)

    Raises:
        InvalidArgument: for an unknown zone code or shipping speed
    """
    return quote_shipment(parcel, zone_code, speed).total


def quote_shipment(
    parcel: Parcel,
    zone_code: str,
    speed: ShippingSpeed | str,
) -> ShippingQuote:
    """
    Calculate the shipping cost for a parcel with the full breakdown.

    Lookups run in order base rate, zone, speed; the first failure wins.
    """
    base_rate = get_base_rate(parcel.billable_weight)
    zone = normalize_zone_code(zone_code)
    zone_multiplier = get_zone_multiplier(zone)
    speed = _coerce_speed(speed)
    speed_multiplier = get_speed_multiplier(speed)

    subtotal = base_rate * zone_multiplier * speed_multiplier
    total = subtotal.quantize(COST_PLACES, rounding=COST_ROUNDING)

    logger.debug(
        "Quote: billable %s lbs, base %s x zone %s (%s) x %s (%s) = %s -> %s",
        parcel.billable_weight, base_rate, zone, zone_multiplier,
        speed.value, speed_multiplier, subtotal, total,
    )

    return ShippingQuote(
        parcel=parcel,
        zone=zone,
        speed=speed,
        base_rate=base_rate,
        zone_multiplier=zone_multiplier,
        speed_multiplier=speed_multiplier,
        subtotal=subtotal,
        total=total,
    )


def try_calculate_shipping_cost(
    parcel: Parcel,
    zone_code: str,
    speed: ShippingSpeed | str,
) -> Result:
    """Calculate the shipping cost, returning a Result instead of raising."""
    try:
        return Result.success(calculate_shipping_cost(parcel, zone_code, speed))
    except InvalidArgument as e:
        return Result.failure(e)


# =============================================================================
# RATE LOOKUPS
# =============================================================================

def get_base_rate(billable_weight: Decimal) -> Decimal:
    """
    Look up the base rate for a billable weight.

    Brackets are checked in ascending order of upper bound (inclusive);
    the first match wins.
    """
    for upper, rate in _base_rate_brackets():
        if upper is None or billable_weight <= upper:
            return rate

    raise ValueError(
        f"Billable weight {billable_weight} lbs has no matching rate bracket. "
        f"Check base_rates.csv has an open-ended top bracket."
    )


def normalize_zone_code(zone_code: str | None) -> str:
    """
    Normalize a zone code (trim, uppercase) and check it is a known zone.

    Raises:
        InvalidArgument: if the code is not one of the known zones
    """
    if zone_code is None:
        raise InvalidArgument(ErrorKind.INVALID_ZONE, INVALID_ZONE_MESSAGE)

    zone = str(zone_code).strip().upper()
    if zone not in _zone_multipliers():
        raise InvalidArgument(ErrorKind.INVALID_ZONE, INVALID_ZONE_MESSAGE)
    return zone


def get_zone_multiplier(zone_code: str | None) -> Decimal:
    """Look up the price multiplier for a destination zone."""
    return _zone_multipliers()[normalize_zone_code(zone_code)]


def get_speed_multiplier(speed: ShippingSpeed | str) -> Decimal:
    """
    Look up the price multiplier for a shipping speed.

    Raises:
        InvalidArgument: if speed is not a known ShippingSpeed
    """
    speed = _coerce_speed(speed)
    multipliers = _speed_multipliers()
    if speed.value not in multipliers:
        raise InvalidArgument(ErrorKind.INVALID_SPEED, INVALID_SPEED_MESSAGE)
    return multipliers[speed.value]


def _coerce_speed(speed) -> ShippingSpeed:
    """Accept a ShippingSpeed or free text naming one."""
    if isinstance(speed, ShippingSpeed):
        return speed
    if isinstance(speed, str):
        return ShippingSpeed.parse(speed)
    raise InvalidArgument(ErrorKind.INVALID_SPEED, INVALID_SPEED_MESSAGE)


# =============================================================================
# TABLE CACHE
# =============================================================================

@lru_cache(maxsize=None)
def _base_rate_brackets() -> tuple[tuple[Decimal | None, Decimal], ...]:
    """(upper bound or None, rate) pairs in ascending order."""
    rates = load_base_rates()
    return tuple(
        (
            None if row["weight_lbs_upper"] is None else Decimal(row["weight_lbs_upper"]),
            Decimal(row["rate"]),
        )
        for row in rates.iter_rows(named=True)
    )


@lru_cache(maxsize=None)
def _zone_multipliers() -> dict[str, Decimal]:
    zones = load_zone_multipliers()
    return {
        row["zone"].strip().upper(): Decimal(row["multiplier"])
        for row in zones.iter_rows(named=True)
    }


@lru_cache(maxsize=None)
def _speed_multipliers() -> dict[str, Decimal]:
    speeds = load_speed_multipliers()
    return {
        row["speed"]: Decimal(row["multiplier"])
        for row in speeds.iter_rows(named=True)
    }


__all__ = [
    "ShippingSpeed",
    "ShippingQuote",
    "calculate_shipping_cost",
    "quote_shipment",
    "try_calculate_shipping_cost",
    "get_base_rate",
    "normalize_zone_code",
    "get_zone_multiplier",
    "get_speed_multiplier",
    "INVALID_ZONE_MESSAGE",
    "INVALID_SPEED_MESSAGE",
]
