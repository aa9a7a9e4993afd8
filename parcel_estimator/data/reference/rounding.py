"""
Cost Rounding Configuration

Totals are rounded half-to-even to whole cents (44.625 -> 44.62).
"""

from decimal import Decimal, ROUND_HALF_EVEN

COST_PLACES = Decimal("0.01")
COST_ROUNDING = ROUND_HALF_EVEN
