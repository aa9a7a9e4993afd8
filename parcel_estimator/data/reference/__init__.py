"""Static reference data: rate tables and parcel limits."""
