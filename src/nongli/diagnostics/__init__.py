"""Diagnostics package.

- pretty_month, new_years_table, round_trip: always available
- leap_months: optional plot (requires the diagnostics extras)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "leap_months"]
