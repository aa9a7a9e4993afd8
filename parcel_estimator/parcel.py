"""
Parcel

Validated package dimensions and weight, with the derived dimensional and
billable weights used for rate lookup.

    from parcel_estimator.parcel import Parcel
    parcel = Parcel(10, 10, 10, 2)
    parcel.billable_weight  # Decimal('8')
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation, ROUND_CEILING

from .data import DIM_FACTOR, MAX_DIMENSION_IN, MAX_WEIGHT_LBS
from .errors import ErrorKind, InvalidArgument, Result

logger = logging.getLogger(__name__)

NON_POSITIVE_MESSAGE = "All dimensions and weight must be positive numbers"


def _to_decimal(value) -> Decimal:
    """Convert an input number to a finite Decimal."""
    if isinstance(value, Decimal):
        result = value
    else:
        # repr keeps floats at their shortest form (0.1 -> "0.1")
        text = repr(value) if isinstance(value, float) else str(value).strip()
        try:
            result = Decimal(text)
        except InvalidOperation:
            raise InvalidArgument(ErrorKind.NON_POSITIVE, NON_POSITIVE_MESSAGE) from None

    if not result.is_finite():
        raise InvalidArgument(ErrorKind.NON_POSITIVE, NON_POSITIVE_MESSAGE)
    return result


@dataclass(frozen=True)
class Parcel:
    """
    A single package, validated on construction.

    Attributes:
        length, width, height  - Inches, each > 0 and <= MAX_DIMENSION_IN
        actual_weight          - Pounds, > 0 and <= MAX_WEIGHT_LBS
        dimensional_weight     - ceil(length * width * height / DIM_FACTOR)
        billable_weight        - max(actual_weight, dimensional_weight)

    Raises:
        InvalidArgument: on non-positive input, an oversize dimension,
            or overweight (checked in that order)
    """
    length: Decimal
    width: Decimal
    height: Decimal
    actual_weight: Decimal
    dimensional_weight: Decimal = field(init=False)
    billable_weight: Decimal = field(init=False)

    def __post_init__(self):
        length = _to_decimal(self.length)
        width = _to_decimal(self.width)
        height = _to_decimal(self.height)
        weight = _to_decimal(self.actual_weight)

        if length <= 0 or width <= 0 or height <= 0 or weight <= 0:
            raise InvalidArgument(ErrorKind.NON_POSITIVE, NON_POSITIVE_MESSAGE)

        if length > MAX_DIMENSION_IN or width > MAX_DIMENSION_IN or height > MAX_DIMENSION_IN:
            raise InvalidArgument(
                ErrorKind.OVERSIZE_DIMENSION,
                f"No dimension may exceed {MAX_DIMENSION_IN} inches",
            )

        if weight > MAX_WEIGHT_LBS:
            raise InvalidArgument(
                ErrorKind.OVERWEIGHT,
                f"Weight may not exceed {MAX_WEIGHT_LBS} lbs",
            )

        dim_weight = (length * width * height / DIM_FACTOR).to_integral_value(
            rounding=ROUND_CEILING
        )
        billable_weight = max(weight, dim_weight)

        object.__setattr__(self, "length", length)
        object.__setattr__(self, "width", width)
        object.__setattr__(self, "height", height)
        object.__setattr__(self, "actual_weight", weight)
        object.__setattr__(self, "dimensional_weight", dim_weight)
        object.__setattr__(self, "billable_weight", billable_weight)

        logger.debug(
            "Parcel %sx%sx%s in, %s lbs: dim weight %s, billable %s",
            length, width, height, weight, dim_weight, billable_weight,
        )

    @property
    def cubic_in(self) -> Decimal:
        """Volume in cubic inches."""
        return self.length * self.width * self.height

    @property
    def uses_dim_weight(self) -> bool:
        """True when dimensional weight is what gets billed."""
        return self.dimensional_weight > self.actual_weight


def try_create_parcel(length, width, height, weight) -> Result:
    """Build a Parcel, returning a Result instead of raising."""
    try:
        return Result.success(Parcel(length, width, height, weight))
    except InvalidArgument as e:
        return Result.failure(e)


__all__ = ["Parcel", "try_create_parcel", "NON_POSITIVE_MESSAGE"]
