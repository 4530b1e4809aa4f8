"""Global time-keeping constants.

This module holds the process-wide constants used by the Julian date conversion and
normalization routines, so there is one consistent place to store them.

References:
    #. :cite:t:`meeus_1998_algorithms`, Chapter 7
"""

from __future__ import annotations

# Time unit conversions, in exact integer nanoseconds
NANOSECONDS_PER_MICROSECOND: int = 1_000
NANOSECONDS_PER_MILLISECOND: int = 1_000_000
NANOSECONDS_PER_SECOND: int = 1_000_000_000
NANOSECONDS_PER_MINUTE: int = 60 * NANOSECONDS_PER_SECOND
NANOSECONDS_PER_HOUR: int = 60 * NANOSECONDS_PER_MINUTE
NANOSECONDS_PER_DAY: int = 24 * NANOSECONDS_PER_HOUR  # 86_400_000_000_000
NANOSECONDS_PER_WEEK: int = 7 * NANOSECONDS_PER_DAY

SECONDS_PER_DAY: int = 86_400

# Limits of the signed 64-bit day & duration counters
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

UNIX_EPOCH_JULIAN_DAY: int = 2440588
"""``int``: midnight-based whole Julian day starting on 1970 January 1 (Julian date 2440587.5)."""

JULIAN_DAY_OFFSET: int = 1720995
"""``int``: Meeus' 1720994.5 day offset, shifted by half a day onto the midnight boundary."""

GREGORIAN_REFORM_DATE: tuple[int, int, int] = (1582, 10, 15)
"""``tuple``: first (year, month, day) where the Gregorian calendar rules apply."""
