from __future__ import annotations

from typing import TYPE_CHECKING, Union

import numpy as np

if TYPE_CHECKING:
    from civiltime.civil import CivilTime

ArrayLike = Union[int, "np.ndarray"]

#: Offset between a ``CivilTime.year`` value and the real Gregorian year.
YEAR_BASE: int = 1900

#: Days per month of a common year, January first.
MONTH_DAYS: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

FEBRUARY: int = 1

_np_month_days: np.ndarray = np.array(MONTH_DAYS, dtype=np.int64)


def is_leap_year(year: ArrayLike) -> bool | np.ndarray:
    """
    Gregorian leap-year rule for a real year (not a 1900 offset).

    Scalars return a plain ``bool``; array input returns a boolean array of
    the same shape.
    """
    if np.ndim(year) == 0:
        y = int(year)
        return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)

    y = np.asarray(year, dtype=np.int64)
    return (y % 4 == 0) & ((y % 100 != 0) | (y % 400 == 0))


def days_in_month(year: ArrayLike, month: ArrayLike) -> int | np.ndarray:
    """
    Length of ``month`` (0-11) in the year stored as the offset ``year``.
    """
    if np.ndim(year) == 0 and np.ndim(month) == 0:
        m = int(month)
        if not 0 <= m <= 11:
            raise ValueError(f"Month must be in 0..11; got {m}.")
        if m == FEBRUARY and is_leap_year(int(year) + YEAR_BASE):
            return 29
        return MONTH_DAYS[m]

    y, m = np.broadcast_arrays(
        np.asarray(year, dtype=np.int64), np.asarray(month, dtype=np.int64)
    )
    if np.any((m < 0) | (m > 11)):
        raise ValueError("Month must be in 0..11.")
    leap_feb = (m == FEBRUARY) & is_leap_year(y + YEAR_BASE)
    return np.where(leap_feb, 29, _np_month_days[m])


def validate_date(civil_time: CivilTime) -> bool:
    """
    Check that every field of ``civil_time`` is in range.

    The year offset ``-1900`` (real year zero) is rejected, and so is a
    60th second: leap seconds are not representable.
    """
    ct = civil_time
    if ct.year == -YEAR_BASE:
        return False
    if not 0 <= ct.month <= 11:
        return False
    if ct.day < 1 or ct.day > days_in_month(ct.year, ct.month):
        return False
    if not 0 <= ct.hour <= 23:
        return False
    if not 0 <= ct.minute <= 59:
        return False
    if not 0 <= ct.second <= 59:
        return False
    return True
