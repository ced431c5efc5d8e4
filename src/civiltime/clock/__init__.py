# src/civiltime/clock/__init__.py
"""
civiltime.clock
~~~~~~~~~~~~~~~

Conversion between ``CivilTime`` and platform timestamps.  The unit of a
platform timestamp is measured, never assumed to be one second.

Basic usage::

    from civiltime.civil import CivilTime
    from civiltime.clock import check_utc_timestamp, second_unit, utc_timestamp

    ct = CivilTime(year=124, month=1, day=29, hour=12)
    ts = utc_timestamp(ct)               # → 1709208000 on POSIX
    check_utc_timestamp(ts, ct)          # → (True, 0)
    second_unit()                        # → 1 on POSIX

Other clocks are plugged in with a ``Platform``::

    from civiltime.clock import Platform
    ts = utc_timestamp(ct, platform=Platform(mktime=my_mktime, gmtime=my_gmtime))

Public API
----------
Platform                Pair of platform primitives (mktime, gmtime).
SYSTEM                  The ``time`` module's primitives.
day_unit                Ticks per day.
hour_unit               Ticks per hour.
second_unit             Ticks per second.
utc_timestamp           CivilTime (UTC) → timestamp.
utc_civil_time          Timestamp → CivilTime (UTC).
check_utc_timestamp     Timestamp/CivilTime agreement check.
utc_timestamp_sec_diff  Signed seconds between a timestamp and a CivilTime.
"""

from __future__ import annotations

from civiltime.clock.platform import SYSTEM, Platform
from civiltime.clock.probe import day_unit, hour_unit, second_unit
from civiltime.clock.resolve import (
    check_utc_timestamp,
    utc_civil_time,
    utc_timestamp,
    utc_timestamp_sec_diff,
)

__all__ = [
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
