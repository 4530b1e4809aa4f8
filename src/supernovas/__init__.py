"""Main Module Documentation.

The top-level module re-exports the precise :class:`.JulianDate` value type, which pairs a whole
Julian day number with a nanosecond-resolution time of day so that date arithmetic stays exact over
astronomically large day counts.
"""

from __future__ import annotations

# Local Imports
from .physics.constants import NANOSECONDS_PER_DAY, UNIX_EPOCH_JULIAN_DAY
from .physics.time.stardate import JulianDate, datetimeToJulianDate

__version__ = "0.1.0"

__all__ = [
    "NANOSECONDS_PER_DAY",
    "UNIX_EPOCH_JULIAN_DAY",
    "JulianDate",
    "datetimeToJulianDate",
]
