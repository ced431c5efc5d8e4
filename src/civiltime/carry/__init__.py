# src/civiltime/carry/__init__.py
"""
civiltime.carry
~~~~~~~~~~~~~~~

In-place calendar arithmetic on a ``CivilTime``.  Overflow of a field is
carried into the next coarser field: seconds into minutes, minutes into
hours, hours into days, and days into months and years.

Every operation mutates its argument and returns the same object, so calls
chain::

    from civiltime.carry import increment_hour, decrement_second
    from civiltime.civil import CivilTime

    ct = CivilTime(year=29, month=11, day=31, hour=23)
    increment_hour(ct, 1) is ct                  # → True; 1930-01-01 00:00
    decrement_second(increment_hour(ct, 2), 1)   # → 1930-01-01 01:59:59

A negative quantity runs the mirror operation.  The year offset has no
zero: stepping back from January of offset 1 lands in December of offset -1.

Public API
----------
increment_day / decrement_day
increment_hour / decrement_hour
increment_minute / decrement_minute
increment_second / decrement_second
"""

from __future__ import annotations

from civiltime.carry.carry import (
    decrement_day,
    decrement_hour,
    decrement_minute,
    decrement_second,
    increment_day,
    increment_hour,
    increment_minute,
    increment_second,
)

__all__ = [
    "increment_day",
    "increment_hour",
    "increment_minute",
    "increment_second",
    "decrement_day",
    "decrement_hour",
    "decrement_minute",
    "decrement_second",
]
