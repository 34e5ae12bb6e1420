"""Diagnostics package.

- round_trip: stdlib only, solar -> lunar -> solar consistency check
- leap_months: leap-month barcode plot (needs the diagnostics extras)
"""

__all__ = ["round_trip", "leap_months"]
