"""
Parcel Shipping Estimator

Shipping cost estimate for a single parcel from its dimensions, weight,
destination zone and shipping speed.
"""

from .calculate_costs import (
    ShippingSpeed,
    ShippingQuote,
    calculate_shipping_cost,
    quote_shipment,
    try_calculate_shipping_cost,
)
from .errors import ErrorKind, InvalidArgument, Result
from .parcel import Parcel, try_create_parcel
from .version import VERSION

__all__ = [
    "Parcel",
    "try_create_parcel",
    "ShippingSpeed",
    "ShippingQuote",
    "calculate_shipping_cost",
    "quote_shipment",
    "try_calculate_shipping_cost",
    "ErrorKind",
    "InvalidArgument",
    "Result",
    "VERSION",
]
