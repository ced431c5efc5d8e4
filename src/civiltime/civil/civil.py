from __future__ import annotations

import time
from dataclasses import dataclass, field, replace

from civiltime.calendar import YEAR_BASE

SECS_IN_DAY: int = 86400
SECS_IN_HOUR: int = 3600
SECS_IN_MIN: int = 60


@dataclass(order=True, slots=True)
class CivilTime:
    """
    Broken-down calendar time with no zone of its own.

    ``year`` is an offset from 1900 and ``month`` is 0-based, as in the C
    ``struct tm``. Fields are not checked; call ``validate_date`` before
    trusting a value. ``isdst`` is carried for the platform's benefit and
    takes no part in equality, ordering or arithmetic.
    """

    year: int = 70
    month: int = 0
    day: int = 1
    hour: int = 0
    minute: int = 0
    second: int = 0
    isdst: int = field(default=-1, compare=False)

    @property
    def real_year(self) -> int:
        return self.year + YEAR_BASE

    def copy(self) -> CivilTime:
        return replace(self)

    # ── platform boundary ────────────────────────────────────────────────

    @classmethod
    def from_struct_time(cls, st: time.struct_time) -> CivilTime:
        return cls(
            year=st.tm_year - YEAR_BASE,
            month=st.tm_mon - 1,
            day=st.tm_mday,
            hour=st.tm_hour,
            minute=st.tm_min,
            second=st.tm_sec,
            isdst=st.tm_isdst,
        )

    def to_struct_time(self) -> time.struct_time:
        # Weekday and year-day are ignored by mktime().
        return time.struct_time((
            self.year + YEAR_BASE, self.month + 1, self.day,
            self.hour, self.minute, self.second,
            0, 1, self.isdst,
        ))

    def __str__(self) -> str:
        return (
            f"{self.real_year:04d}-{self.month + 1:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )


def _key(ct: CivilTime) -> tuple[int, int, int, int, int, int]:
    return (ct.year, ct.month, ct.day, ct.hour, ct.minute, ct.second)


def compare(first: CivilTime, second: CivilTime) -> int:
    """
    -1 if ``first`` is earlier than ``second``, 1 if later, 0 if equal.
    """
    a, b = _key(first), _key(second)
    return (a > b) - (a < b)


def intraday_secs_diff(first: CivilTime, second: CivilTime) -> int:
    """
    Signed seconds from ``first`` to ``second``, assuming the two are within
    24 hours of each other.

    Only the time of day is subtracted; the calendar order decides which
    way a wrap past midnight goes. 10:00 on one day against 14:00 on the
    next gives 4 hours, not 28.
    """
    order = compare(first, second)
    if order == 0:
        return 0

    difference = (
        (second.hour - first.hour) * SECS_IN_HOUR
        + (second.minute - first.minute) * SECS_IN_MIN
        + (second.second - first.second)
    )
    if order == 1 and difference > 0:
        difference -= SECS_IN_DAY
    elif order == -1 and difference < 0:
        difference += SECS_IN_DAY
    return difference
