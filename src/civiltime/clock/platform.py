from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from civiltime._exceptions import ClockError
from civiltime.civil import CivilTime

logger = logging.getLogger(__name__)

MktimeFn = Callable[[time.struct_time], float]
GmtimeFn = Callable[[int], time.struct_time]


@dataclass(frozen=True, slots=True)
class Platform:
    """
    The two platform primitives the clock functions rely on.

    - ``mktime`` reads a ``struct_time`` as *local* time and returns a tick
      count of unspecified unit.
    - ``gmtime`` turns a tick count into a UTC ``struct_time``.

    Whatever ``gmtime`` returns is copied into a fresh ``CivilTime`` before
    the next platform call, so primitives that reuse a buffer are safe to
    plug in.
    """

    mktime: MktimeFn = time.mktime
    gmtime: GmtimeFn = time.gmtime

    def local_timestamp(self, ct: CivilTime) -> int:
        try:
            ticks = self.mktime(ct.to_struct_time())
        except (OverflowError, OSError, ValueError) as exc:
            raise ClockError(f"Couldn't get calendar time for {ct}.") from exc
        return int(ticks)

    def utc_civil_time(self, timestamp: int) -> CivilTime:
        try:
            st = self.gmtime(timestamp)
        except (OverflowError, OSError, ValueError) as exc:
            raise ClockError(f"Couldn't get UTC time for {timestamp}.") from exc
        return CivilTime.from_struct_time(st)


SYSTEM = Platform()
