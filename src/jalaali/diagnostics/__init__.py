"""Diagnostics package.

- round_trip, leap_years, pretty_month: always available
- nowruz_scatter: needs the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["round_trip", "leap_years", "pretty_month", "nowruz_scatter"]
