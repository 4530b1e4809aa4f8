"""Contains all the custom-defined exceptions used in :mod:`supernovas`."""

from __future__ import annotations


class JulianDateOverflowError(OverflowError):
    """Exception indicating a day counter or nanosecond duration left the signed 64-bit range."""


class DurationConversionError(ValueError):
    """Exception indicating a duration or time point can't be converted to exact nanoseconds."""
