"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime

# SUPERNOVAS Imports
from supernovas.physics.time.stardate import JulianDate, datetimeToJulianDate

# Common julian dates
TEST_START_DATETIME = datetime(2018, 12, 1, 12)
TEST_START_JD: JulianDate = datetimeToJulianDate(TEST_START_DATETIME)

# (year, month, day) -> whole Julian day starting at that date's midnight
KNOWN_JULIAN_DAYS: list[tuple[tuple[int, int, int], int]] = [
    ((1970, 1, 1), 2440588),
    ((2000, 1, 1), 2451545),
    ((2021, 6, 3), 2459369),  # midnight-based day, JD 2459368.5
    ((1987, 6, 19), 2446966),
    ((1957, 10, 4), 2436116),
    ((1600, 1, 1), 2305448),
    ((1582, 10, 15), 2299161),
    ((1582, 10, 4), 2299160),
    ((333, 1, 27), 1842713),
    ((0, 3, 1), 1721118),
    ((-1000, 7, 12), 1356001),
    ((-4712, 1, 1), 0),
]
"""Reference dates from :cite:t:`meeus_1998_algorithms`, Chapter 7, shifted onto midnight."""
