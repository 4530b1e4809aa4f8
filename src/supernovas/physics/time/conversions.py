"""Helper functions that convert between different forms of time.

Every function here is pure: calendar dates, clock time points and durations go in, and a
normalized ``(day, time_of_day)`` pair (or an exact integer nanosecond count) comes out. All
arithmetic is exact, using Python integers and :class:`fractions.Fraction` for the Meeus
coefficients, so nothing degrades for large day counts.
"""

from __future__ import annotations

# Standard Library Imports
import math
from datetime import datetime, timedelta, timezone
from fractions import Fraction

# Third Party Imports
import numpy as np

# Local Imports
from ...common.behavioral_config import BehavioralConfig
from ...common.exceptions import DurationConversionError, JulianDateOverflowError
from ...common.logger import supernovasLogDebug, supernovasLogError
from .. import constants as const

# Nanoseconds per unit for every linear numpy time unit at or above nanosecond resolution
_NANOSECONDS_PER_UNIT: dict[str, int] = {
    "W": const.NANOSECONDS_PER_WEEK,
    "D": const.NANOSECONDS_PER_DAY,
    "h": const.NANOSECONDS_PER_HOUR,
    "m": const.NANOSECONDS_PER_MINUTE,
    "s": const.NANOSECONDS_PER_SECOND,
    "ms": const.NANOSECONDS_PER_MILLISECOND,
    "us": const.NANOSECONDS_PER_MICROSECOND,
    "ns": 1,
}

# Units per nanosecond for the sub-nanosecond numpy time units
_UNITS_PER_NANOSECOND: dict[str, int] = {
    "ps": 10**3,
    "fs": 10**6,
    "as": 10**9,
}

_YEAR_COEFFICIENT = Fraction(1461, 4)  # 365.25
_YEAR_CORRECTION = Fraction(3, 4)  # 0.75
_MONTH_COEFFICIENT = Fraction(306001, 10000)  # 30.6001

_NAIVE_UNIX_EPOCH = datetime(1970, 1, 1)
_AWARE_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def checkDayRange(day: int) -> int:
    """Ensure a whole day count fits the signed 64-bit day counter.

    Raises:
        :class:`.JulianDateOverflowError`: if `day` is out of range
    """
    if not const.INT64_MIN <= day <= const.INT64_MAX:
        supernovasLogError(f"Julian day {day} overflows the signed 64-bit day counter.")
        raise JulianDateOverflowError(day)

    return day


def normalizeDayTime(day: int, duration_ns: int) -> tuple[int, int]:
    """Carry a signed nanosecond duration into a whole day count.

    Floor division is used, so a negative duration borrows from `day` and the returned time of
    day is always in ``[0, NANOSECONDS_PER_DAY)``.

    Args:
        day (``int``): base whole day count
        duration_ns (``int``): signed duration in nanoseconds, of any magnitude

    Returns:
        ``tuple``: normalized ``(day, time_of_day)`` pair, time of day in nanoseconds
    """
    total_days, remainder_ns = divmod(duration_ns, const.NANOSECONDS_PER_DAY)

    return checkDayRange(day + total_days), remainder_ns


def isInteger(value) -> bool:
    """Whether `value` is a plain or numpy integer, excluding booleans & numpy time types."""
    if isinstance(value, (bool, np.bool_, np.timedelta64)):
        return False

    return isinstance(value, (int, np.integer))


def isDuration(value) -> bool:
    """Whether `value` is one of the supported duration types."""
    return isinstance(value, (np.timedelta64, timedelta)) or isInteger(value)


def _numpyTimeToNanoseconds(value: np.timedelta64 | np.datetime64) -> int:
    """Convert a numpy time scalar to exact integer nanoseconds, based on its unit metadata."""
    if np.isnat(value):
        supernovasLogError("Cannot convert NaT to a Julian date time.")
        raise DurationConversionError(value)

    unit, count = np.datetime_data(value.dtype)
    ticks = int(value.astype(np.int64)) * count

    if unit in _NANOSECONDS_PER_UNIT:
        return ticks * _NANOSECONDS_PER_UNIT[unit]

    if unit not in _UNITS_PER_NANOSECOND:
        supernovasLogError(f"Time unit {unit!r} has no fixed length in nanoseconds.")
        raise DurationConversionError(value)

    nanoseconds, leftover = divmod(ticks, _UNITS_PER_NANOSECOND[unit])
    if leftover:
        if BehavioralConfig.getConfig().time.SubNanosecondPolicy != "floor":
            supernovasLogError(f"{value!r} is not a whole number of nanoseconds.")
            raise DurationConversionError(value)

        supernovasLogDebug(f"Flooring {value!r} to {nanoseconds} ns.")

    return nanoseconds


def durationToNanoseconds(duration) -> int:
    """Convert a duration to an exact, signed integer count of nanoseconds.

    Args:
        duration (``int`` | ``timedelta`` | ``numpy.timedelta64``): plain integers are taken to
            already be nanoseconds

    Raises:
        TypeError: if `duration` isn't a supported duration type
        :class:`.DurationConversionError`: if `duration` can't be represented exactly

    Returns:
        ``int``: signed nanoseconds
    """
    if isinstance(duration, np.timedelta64):
        return _numpyTimeToNanoseconds(duration)

    if isinstance(duration, timedelta):
        seconds = duration.days * const.SECONDS_PER_DAY + duration.seconds
        return (
            seconds * const.NANOSECONDS_PER_SECOND
            + duration.microseconds * const.NANOSECONDS_PER_MICROSECOND
        )

    if isInteger(duration):
        return int(duration)

    supernovasLogError(f"Unsupported duration type: {type(duration)}")
    raise TypeError(type(duration))


def nanosecondsToTimedelta64(nanoseconds: int) -> np.timedelta64:
    """Wrap a nanosecond count in a ``numpy.timedelta64`` without silent wraparound.

    Raises:
        :class:`.JulianDateOverflowError`: if `nanoseconds` doesn't fit the 64-bit counter
    """
    # numpy reserves the minimum int64 value for NaT
    if not const.INT64_MIN < nanoseconds <= const.INT64_MAX:
        supernovasLogError(f"{nanoseconds} ns overflows a 64-bit nanosecond duration.")
        raise JulianDateOverflowError(nanoseconds)

    return np.timedelta64(nanoseconds, "ns")


def timePointToNanoseconds(time_point) -> int:
    """Determine the elapsed nanoseconds between the Unix epoch and a clock time point.

    Args:
        time_point (``datetime`` | ``numpy.datetime64`` | duration): naive ``datetime`` objects
            are taken to be UTC, and durations are taken to already be the elapsed time

    Returns:
        ``int``: signed nanoseconds since 1970-01-01T00:00:00
    """
    if isinstance(time_point, datetime):
        epoch = _NAIVE_UNIX_EPOCH if time_point.tzinfo is None else _AWARE_UNIX_EPOCH
        return durationToNanoseconds(time_point - epoch)

    if isinstance(time_point, np.datetime64):
        unit, _ = np.datetime_data(time_point.dtype)
        if unit in ("Y", "M"):
            # Year & month ticks are exact whole days once cast
            time_point = time_point.astype("datetime64[D]")
        return _numpyTimeToNanoseconds(time_point)

    return durationToNanoseconds(time_point)


def timePointToJulianDay(time_point) -> tuple[int, int]:
    """Convert a clock time point to a normalized ``(day, time_of_day)`` pair.

    The elapsed time since the Unix epoch is added to :data:`.UNIX_EPOCH_JULIAN_DAY` with the
    same carry/borrow rule as :func:`.normalizeDayTime`.
    """
    return normalizeDayTime(const.UNIX_EPOCH_JULIAN_DAY, timePointToNanoseconds(time_point))


def isGregorianDate(year: int, month: int, day: int) -> bool:
    """Whether a calendar date falls on or after the 1582-10-15 Gregorian reform."""
    return (year, month, day) >= const.GREGORIAN_REFORM_DATE


def gregorianCorrection(century_year: int) -> int:
    """Century correction term ``B`` for dates under the Gregorian calendar."""
    century = century_year // 100
    return 2 - century + century // 4


def yearTerm(century_year: int) -> int:
    """Whole days contributed by the (January/February adjusted) year, term ``C``.

    Negative years subtract 0.75 before truncating toward zero, which matches flooring.
    """
    if century_year >= 0:
        return math.floor(_YEAR_COEFFICIENT * century_year)

    return math.trunc(_YEAR_COEFFICIENT * century_year - _YEAR_CORRECTION)


def monthTerm(effective_month: int) -> int:
    """Whole days contributed by the (January/February adjusted) month, term ``D``."""
    return math.floor(_MONTH_COEFFICIENT * (effective_month + 1))


def calendarToJulianDay(year: int, month: int, day: int, time_of_day=0) -> tuple[int, int]:
    """Convert a proleptic calendar date & time of day to a normalized ``(day, time_of_day)``.

    Dates before 1582-10-15 are read on the Julian calendar, later dates on the Gregorian one.
    No calendar validation is done, so a month of 13 or a day of 32 simply runs on into the
    following month or year.

    References:
        :cite:t:`meeus_1998_algorithms`, Chapter 7

    Args:
        year (``int``): calendar year, astronomical numbering (1 BC is year 0)
        month (``int``): month of the year
        day (``int``): day of the month
        time_of_day (duration, optional): time elapsed since midnight. Defaults to 0.

    Returns:
        ``tuple``: whole Julian day (starting at midnight) and time of day in nanoseconds
    """
    for name, value in (("year", year), ("month", month), ("day", day)):
        if not isInteger(value):
            supernovasLogError(f"Calendar {name} must be an integer, got {value!r}")
            raise TypeError(type(value))

    year, month, day = int(year), int(month), int(day)

    # January & February count as months 13 & 14 of the previous year
    if month in (1, 2):
        century_year, effective_month = year - 1, month + 12
    else:
        century_year, effective_month = year, month

    correction = gregorianCorrection(century_year) if isGregorianDate(year, month, day) else 0
    julian_day = (
        correction
        + yearTerm(century_year)
        + monthTerm(effective_month)
        + day
        + const.JULIAN_DAY_OFFSET
    )

    return normalizeDayTime(julian_day, durationToNanoseconds(time_of_day))
