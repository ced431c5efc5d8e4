from __future__ import annotations

import operator

from civiltime.calendar import days_in_month
from civiltime.civil import CivilTime

HOURS_IN_DAY: int = 24
MINS_IN_HOUR: int = 60
SECS_IN_MIN: int = 60

JANUARY: int = 0
DECEMBER: int = 11


# ── days ─────────────────────────────────────────────────────────────────

def increment_day(ct: CivilTime, quantity: int) -> CivilTime:
    """
    Add ``quantity`` days to ``ct`` in place, rolling the month and year
    over as needed. Returns ``ct``.

    The year offset never becomes zero going forward: -1 advances to 1.
    """
    quantity = operator.index(quantity)
    if quantity < 0:
        return decrement_day(ct, -quantity)

    for _ in range(quantity):
        ct.day += 1
        if ct.day > days_in_month(ct.year, ct.month):
            ct.day = 1
            if ct.month == DECEMBER:
                ct.month = JANUARY
                ct.year = 1 if ct.year == -1 else ct.year + 1
            else:
                ct.month += 1
    return ct


def decrement_day(ct: CivilTime, quantity: int) -> CivilTime:
    """
    Subtract ``quantity`` days from ``ct`` in place. Returns ``ct``.

    The year offset never becomes zero going backward: 1 retreats to -1.
    """
    quantity = operator.index(quantity)
    if quantity < 0:
        return increment_day(ct, -quantity)

    for _ in range(quantity):
        if ct.day > 1:
            ct.day -= 1
            continue
        if ct.month == JANUARY:
            ct.month = DECEMBER
            ct.year = -1 if ct.year == 1 else ct.year - 1
        elif JANUARY < ct.month <= DECEMBER:
            ct.month -= 1
        else:
            raise ValueError(f"Month must be in 0..11; got {ct.month}.")
        ct.day = days_in_month(ct.year, ct.month)
    return ct


# ── hours, minutes, seconds ──────────────────────────────────────────────

def increment_hour(ct: CivilTime, quantity: int) -> CivilTime:
    quantity = operator.index(quantity)
    if quantity < 0:
        return decrement_hour(ct, -quantity)

    days, ct.hour = divmod(ct.hour + quantity, HOURS_IN_DAY)
    return increment_day(ct, days)


def decrement_hour(ct: CivilTime, quantity: int) -> CivilTime:
    quantity = operator.index(quantity)
    if quantity < 0:
        return increment_hour(ct, -quantity)

    days, ct.hour = divmod(ct.hour - quantity, HOURS_IN_DAY)
    return decrement_day(ct, -days)


def increment_minute(ct: CivilTime, quantity: int) -> CivilTime:
    quantity = operator.index(quantity)
    if quantity < 0:
        return decrement_minute(ct, -quantity)

    hours, ct.minute = divmod(ct.minute + quantity, MINS_IN_HOUR)
    return increment_hour(ct, hours)


def decrement_minute(ct: CivilTime, quantity: int) -> CivilTime:
    quantity = operator.index(quantity)
    if quantity < 0:
        return increment_minute(ct, -quantity)

    hours, ct.minute = divmod(ct.minute - quantity, MINS_IN_HOUR)
    return decrement_hour(ct, -hours)


def increment_second(ct: CivilTime, quantity: int) -> CivilTime:
    quantity = operator.index(quantity)
    if quantity < 0:
        return decrement_second(ct, -quantity)

    minutes, ct.second = divmod(ct.second + quantity, SECS_IN_MIN)
    return increment_minute(ct, minutes)


def decrement_second(ct: CivilTime, quantity: int) -> CivilTime:
    quantity = operator.index(quantity)
    if quantity < 0:
        return increment_second(ct, -quantity)

    minutes, ct.second = divmod(ct.second - quantity, SECS_IN_MIN)
    return decrement_minute(ct, -minutes)
