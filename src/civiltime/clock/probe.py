from __future__ import annotations

import logging
from typing import Callable

from civiltime.carry import increment_day, increment_hour, increment_second
from civiltime.civil import CivilTime
from civiltime.clock.platform import SYSTEM, Platform

logger = logging.getLogger(__name__)


def _reference_datum() -> CivilTime:
    # 1930-01-02 12:00, clear of any DST change.
    return CivilTime(year=30, month=0, day=2, hour=12, isdst=-1)


def _probe(
    step: Callable[[CivilTime, int], CivilTime],
    platform: Platform,
) -> int:
    datum = _reference_datum()
    datum_time = platform.local_timestamp(datum)
    next_time = platform.local_timestamp(step(datum.copy(), 1))
    return next_time - datum_time


def day_unit(*, platform: Platform = SYSTEM) -> int:
    """Platform ticks in one day."""
    unit = _probe(increment_day, platform)
    logger.debug(f"One day is {unit} ticks.")
    return unit


def hour_unit(*, platform: Platform = SYSTEM) -> int:
    """Platform ticks in one hour."""
    unit = _probe(increment_hour, platform)
    logger.debug(f"One hour is {unit} ticks.")
    return unit


def second_unit(*, platform: Platform = SYSTEM) -> int:
    """
    Platform ticks in one second.

    The unit is measured on every call; nothing is cached between calls.
    """
    unit = _probe(increment_second, platform)
    logger.debug(f"One second is {unit} ticks.")
    return unit
