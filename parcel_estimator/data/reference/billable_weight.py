"""
Billable Weight Configuration

Dimensional weight rules and parcel limits.
"""

DIM_FACTOR = 139              # Cubic inches per pound (domestic DIM divisor)

# Parcel limits (inclusive)
MAX_DIMENSION_IN = 60         # Applies to each of length, width, height
MAX_WEIGHT_LBS = 150          # Actual weight only; DIM weight is not capped
