"""
Estimator Data

Reference tables and configuration for the cost calculation.

Structure:
    - reference/: Static reference data (rates, zones, speeds, limits)

Table values are read as text so that amounts convert to Decimal exactly.
"""

import polars as pl
from pathlib import Path

from .reference.billable_weight import (
    DIM_FACTOR,
    MAX_DIMENSION_IN,
    MAX_WEIGHT_LBS,
)
from .reference.rounding import (
    COST_PLACES,
    COST_ROUNDING,
)


REFERENCE_DIR = Path(__file__).parent / "reference"


def load_base_rates() -> pl.DataFrame:
    """
    Load base rate brackets, sorted by upper bound.

    Returns:
        DataFrame with columns:
            - weight_lbs_lower: Lower bound of weight bracket (exclusive)
            - weight_lbs_upper: Upper bound of weight bracket (inclusive,
              null for the open-ended top bracket)
            - rate: Base rate for this bracket
    """
    rates = pl.read_csv(
        REFERENCE_DIR / "base_rates.csv",
        schema_overrides={
            "weight_lbs_lower": pl.Utf8,
            "weight_lbs_upper": pl.Utf8,
            "rate": pl.Utf8,
        }
    )

    # Open-ended bracket last
    return (
        rates
        .with_columns(
            pl.col("weight_lbs_upper").cast(pl.Float64).alias("_sort_key")
        )
        .sort("_sort_key", nulls_last=True)
        .drop("_sort_key")
    )


def load_zone_multipliers() -> pl.DataFrame:
    """
    Load zone multipliers.

    Returns:
        DataFrame with columns: zone (string code "1".."5"), multiplier
    """
    return pl.read_csv(
        REFERENCE_DIR / "zones.csv",
        schema_overrides={
            "zone": pl.Utf8,        # Zone codes are matched as strings
            "multiplier": pl.Utf8,
        }
    )


def load_speed_multipliers() -> pl.DataFrame:
    """
    Load shipping speed multipliers.

    Returns:
        DataFrame with columns: speed (ShippingSpeed value), multiplier
    """
    return pl.read_csv(
        REFERENCE_DIR / "speeds.csv",
        schema_overrides={
            "speed": pl.Utf8,
            "multiplier": pl.Utf8,
        }
    )


__all__ = [
    # Reference data loaders
    "load_base_rates",
    "load_zone_multipliers",
    "load_speed_multipliers",
    "REFERENCE_DIR",
    # Billable weight config
    "DIM_FACTOR",
    "MAX_DIMENSION_IN",
    "MAX_WEIGHT_LBS",
    # Rounding config
    "COST_PLACES",
    "COST_ROUNDING",
]
