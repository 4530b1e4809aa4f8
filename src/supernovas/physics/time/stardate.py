"""Defines the :class:`.JulianDate` class and supporting functions.

A :class:`.JulianDate` splits a Julian date into a whole, midnight-based day number and an integer
nanosecond time of day. Keeping both parts as integers means adding a few nanoseconds to a date
millions of days from the epoch is still exact, which a single ``float`` can't manage.

.. code-block:: python

    from datetime import timedelta

    julian_date = JulianDate.fromCalendarDate(2021, 6, 3)
    later = julian_date + timedelta(hours=36)

    assert later.day == julian_date.day + 1
    assert later.nanoseconds == 12 * 3_600_000_000_000

Values are immutable: every operation returns a new :class:`.JulianDate`, so instances can be
shared freely, hashed, and used as dictionary keys.
"""

from __future__ import annotations

# Standard Library Imports
import math
import time
from fractions import Fraction
from typing import TYPE_CHECKING

# Third Party Imports
import numpy as np

# Local Imports
from ...common.exceptions import DurationConversionError
from ...common.logger import supernovasLogError
from ..constants import NANOSECONDS_PER_DAY
from .conversions import (
    calendarToJulianDay,
    checkDayRange,
    durationToNanoseconds,
    isDuration,
    isInteger,
    nanosecondsToTimedelta64,
    normalizeDayTime,
    timePointToJulianDay,
)

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from datetime import datetime


class JulianDate:
    """Julian date stored as a whole day number & a nanosecond time of day.

    Invariant: ``0 <= time_of_day < NANOSECONDS_PER_DAY``. Any construction or arithmetic that
    leaves this range carries (or borrows) whole days into :attr:`.day`.
    """

    __slots__ = ("_day", "_time_of_day")

    # Make numpy scalars defer to the reflected operators below
    __array_ufunc__ = None

    def __init__(self, day: int = 0, time_of_day=0):
        """Construct a Julian date from a raw day & time of day.

        Args:
            day (``int``, optional): whole Julian day number. Defaults to 0.
            time_of_day (duration, optional): time since the start of `day`, which may be
                negative or longer than a day. Defaults to 0.
        """
        if not isInteger(day):
            supernovasLogError(f"JulianDate: day must be an integer, got {day!r}")
            raise TypeError(type(day))

        day, nanoseconds = normalizeDayTime(int(day), durationToNanoseconds(time_of_day))
        object.__setattr__(self, "_day", day)
        object.__setattr__(self, "_time_of_day", nanoseconds)

    @classmethod
    def _fromNormalized(cls, day: int, nanoseconds: int) -> JulianDate:
        """Build an instance from an already normalized pair, skipping re-validation."""
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_day", day)
        object.__setattr__(instance, "_time_of_day", nanoseconds)
        return instance

    @classmethod
    def fromCalendarDate(cls, year: int, month: int, day: int, time_of_day=0) -> JulianDate:
        """From a proleptic Gregorian/Julian calendar date, return the :class:`.JulianDate`.

        See :func:`.calendarToJulianDay` for the conversion algorithm.

        Args:
            year (``int``): calendar year, astronomical numbering
            month (``int``): month of the year
            day (``int``): day of the month
            time_of_day (duration, optional): time elapsed since midnight. Defaults to 0.
        """
        return cls._fromNormalized(*calendarToJulianDay(year, month, day, time_of_day))

    @classmethod
    def fromTimePoint(cls, time_point) -> JulianDate:
        """From a clock time point, return the :class:`.JulianDate`.

        Args:
            time_point (``datetime`` | ``numpy.datetime64`` | duration): instant to convert, or the
                elapsed time since the Unix epoch
        """
        return cls._fromNormalized(*timePointToJulianDay(time_point))

    @classmethod
    def now(cls) -> JulianDate:
        """Return the :class:`.JulianDate` of the current system clock time."""
        return cls.fromTimePoint(time.time_ns())

    @classmethod
    def fromFloat(cls, julian_date: float) -> JulianDate:
        """From a floating point Julian date, return the :class:`.JulianDate`.

        The whole part becomes :attr:`.day` and the exact binary fraction of the ``float`` is
        rounded to the nearest nanosecond. Integers give a time of day of 0.

        Raises:
            :class:`.DurationConversionError`: if `julian_date` isn't finite
        """
        if isInteger(julian_date):
            return cls(int(julian_date))

        if not isinstance(julian_date, (float, np.floating)):
            supernovasLogError(f"JulianDate: expected a real number, got {julian_date!r}")
            raise TypeError(type(julian_date))

        if not math.isfinite(julian_date):
            supernovasLogError(f"JulianDate: cannot convert {julian_date!r}")
            raise DurationConversionError(julian_date)

        exact = Fraction(float(julian_date))
        day = math.floor(exact)
        return cls(day, round((exact - day) * NANOSECONDS_PER_DAY))

    @property
    def day(self) -> int:
        """``int``: whole Julian day number, starting at midnight."""
        return self._day

    @property
    def nanoseconds(self) -> int:
        """``int``: nanoseconds elapsed since the start of :attr:`.day`."""
        return self._time_of_day

    @property
    def time_of_day(self) -> np.timedelta64:
        """``numpy.timedelta64``: time elapsed since the start of :attr:`.day`."""
        return np.timedelta64(self._time_of_day, "ns")

    def __setattr__(self, name, value):
        """Reject attribute assignment, instances are immutable."""
        raise AttributeError(f"JulianDate is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        """Reject attribute deletion, instances are immutable."""
        raise AttributeError(f"JulianDate is immutable, cannot delete {name!r}")

    def increment(self) -> JulianDate:
        """Return the date one whole day later, at the same time of day."""
        return self._fromNormalized(checkDayRange(self._day + 1), self._time_of_day)

    def decrement(self) -> JulianDate:
        """Return the date one whole day earlier, at the same time of day."""
        return self._fromNormalized(checkDayRange(self._day - 1), self._time_of_day)

    def _shift(self, duration_ns: int) -> JulianDate:
        return self._fromNormalized(*normalizeDayTime(self._day, self._time_of_day + duration_ns))

    def __add__(self, duration):
        """Advance this date by a duration."""
        if not isDuration(duration):
            return NotImplemented

        return self._shift(durationToNanoseconds(duration))

    def __radd__(self, duration):
        """Advance this date by a duration, with the duration on the left."""
        return self.__add__(duration)

    def __sub__(self, other):
        """Back up this date by a duration, or find the duration since another date."""
        if isinstance(other, JulianDate):
            difference = (self._day - other._day) * NANOSECONDS_PER_DAY
            return nanosecondsToTimedelta64(difference + self._time_of_day - other._time_of_day)

        if not isDuration(other):
            return NotImplemented

        return self._shift(-durationToNanoseconds(other))

    def compare(self, other: JulianDate) -> int:
        """Three-way comparison by day, then time of day.

        Returns:
            ``int``: -1, 0 or 1 as this date is before, equal to, or after `other`
        """
        if not isinstance(other, JulianDate):
            supernovasLogError(f"JulianDate: cannot compare with {type(other)}")
            raise TypeError(type(other))

        mine = (self._day, self._time_of_day)
        theirs = (other._day, other._time_of_day)
        return (mine > theirs) - (mine < theirs)

    def __eq__(self, other):
        """."""
        if not isinstance(other, JulianDate):
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other):
        """."""
        if not isinstance(other, JulianDate):
            return NotImplemented
        return self.compare(other) != 0

    def __lt__(self, other):
        """."""
        if not isinstance(other, JulianDate):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        """."""
        if not isinstance(other, JulianDate):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        """."""
        if not isinstance(other, JulianDate):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        """."""
        if not isinstance(other, JulianDate):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self):
        """Hash the normalized ``(day, time_of_day)`` pair."""
        return hash((self._day, self._time_of_day))

    def __float__(self):
        """Return the day plus its time of day fraction; lossy for large day numbers."""
        return float(self._day + Fraction(self._time_of_day, NANOSECONDS_PER_DAY))

    def __reduce__(self):
        """Pickle through the raw constructor."""
        return (JulianDate, (self._day, self._time_of_day))

    def __repr__(self):
        """Return a string representation of this :class:`.JulianDate`."""
        return f"JulianDate(day={self._day}, time_of_day={self._time_of_day})"


def datetimeToJulianDate(date_time: datetime) -> JulianDate:
    """Convert a ``datetime`` object to a :class:`.JulianDate`.

    Args:
        date_time (``datetime``): ``datetime`` object to be converted, naive values are taken to be
            UTC

    Returns:
        :class:`.JulianDate`: converted object, exact to the microsecond
    """
    return JulianDate.fromTimePoint(date_time)
