# src/civiltime/civil/__init__.py
"""
civiltime.civil
~~~~~~~~~~~~~~~

The ``CivilTime`` value and its ordering.

Basic usage::

    from civiltime.civil import CivilTime, compare, intraday_secs_diff

    late  = CivilTime(year=124, month=5, day=1, hour=23)
    early = CivilTime(year=124, month=5, day=2, hour=1)
    compare(late, early)              # → -1
    intraday_secs_diff(late, early)   # → 7200

Public API
----------
CivilTime           Broken-down calendar time (year offset from 1900).
compare             Three-way chronological comparison.
intraday_secs_diff  Signed seconds between two times less than a day apart.
"""

from __future__ import annotations

from civiltime.civil.civil import CivilTime, compare, intraday_secs_diff

__all__ = [
    "CivilTime",
    "compare",
    "intraday_secs_diff",
]
