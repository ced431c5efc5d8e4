# src/civiltime/calendar/__init__.py
"""
civiltime.calendar
~~~~~~~~~~~~~~~~~~

Proleptic Gregorian calendar rules: leap years, month lengths and field
validation of a ``CivilTime``.

Basic usage::

    from civiltime.calendar import is_leap_year, validate_date
    from civiltime.civil import CivilTime

    is_leap_year(2000)                                    # → True
    validate_date(CivilTime(year=99, month=1, day=29))    # → False (1999)

NumPy arrays are accepted by ``is_leap_year`` and ``days_in_month``::

    import numpy as np
    is_leap_year(np.array([1900, 2000, 2024]))   # → [False, True, True]

Public API
----------
is_leap_year    Gregorian leap-year predicate on a real year.
days_in_month   Month length for a year offset and a 0-based month.
validate_date   Range check of every CivilTime field.
"""

from __future__ import annotations

from civiltime.calendar.calendar import (
    MONTH_DAYS,
    YEAR_BASE,
    days_in_month,
    is_leap_year,
    validate_date,
)

__all__ = [
    "MONTH_DAYS",
    "YEAR_BASE",
    "days_in_month",
    "is_leap_year",
    "validate_date",
]
