"""Contains the :class:`.JulianDate` value type and the conversion functions it is built on.

:mod:`.conversions` holds the pure calendar, clock & normalization arithmetic, and
:mod:`.stardate` wraps its ``(day, time_of_day)`` results in an immutable value type.
"""
