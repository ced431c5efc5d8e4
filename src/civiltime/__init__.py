# src/civiltime/__init__.py
"""
civiltime
~~~~~~~~~

Calendar arithmetic on broken-down civil time, and conversion to and from
platform timestamps whose unit and leap-second behaviour are measured rather
than assumed.

Basic usage::

    import civiltime as ct

    t = ct.CivilTime(year=124, month=11, day=31, hour=23, minute=59, second=59)
    ct.validate_date(t)             # → True
    ct.increment_second(t, 1)       # → 2025-01-01 00:00:00, same object
    ts = ct.utc_timestamp(t)
    ct.check_utc_timestamp(ts, t)   # → (True, 0)

Public API
----------
See ``civiltime.calendar``, ``civiltime.civil``, ``civiltime.carry`` and
``civiltime.clock``.

Errors
------
CivilTimeError   Base exception.
ClockError       The platform could not convert a time.
ResolutionError  UTC resolution did not converge.
"""

from __future__ import annotations

from civiltime._exceptions import CivilTimeError, ClockError, ResolutionError
from civiltime.calendar import days_in_month, is_leap_year, validate_date
from civiltime.carry import (
    decrement_day,
    decrement_hour,
    decrement_minute,
    decrement_second,
    increment_day,
    increment_hour,
    increment_minute,
    increment_second,
)
from civiltime.civil import CivilTime, compare, intraday_secs_diff
from civiltime.clock import (
    SYSTEM,
    Platform,
    check_utc_timestamp,
    day_unit,
    hour_unit,
    second_unit,
    utc_civil_time,
    utc_timestamp,
    utc_timestamp_sec_diff,
)

__all__ = [
    "CivilTime",
    "CivilTimeError",
    "ClockError",
    "ResolutionError",
    "is_leap_year",
    "days_in_month",
    "validate_date",
    "compare",
    "intraday_secs_diff",
    "increment_day",
    "increment_hour",
    "increment_minute",
    "increment_second",
    "decrement_day",
    "decrement_hour",
    "decrement_minute",
    "decrement_second",
    "Platform",
    "SYSTEM",
    "day_unit",
    "hour_unit",
    "second_unit",
    "utc_timestamp",
    "utc_civil_time",
    "check_utc_timestamp",
    "utc_timestamp_sec_diff",
]
