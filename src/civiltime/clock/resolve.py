from __future__ import annotations

import logging

from civiltime._exceptions import ResolutionError
from civiltime.civil import CivilTime, compare, intraday_secs_diff
from civiltime.clock.platform import SYSTEM, Platform
from civiltime.clock.probe import second_unit

logger = logging.getLogger(__name__)


def utc_civil_time(timestamp: int, *, platform: Platform = SYSTEM) -> CivilTime:
    """UTC calendar time of ``timestamp`` as an owned ``CivilTime``."""
    return platform.utc_civil_time(timestamp)


def utc_timestamp_sec_diff(
    timestamp: int,
    utc: CivilTime,
    *,
    platform: Platform = SYSTEM,
) -> int:
    """
    Signed seconds by which ``timestamp`` is ahead of the UTC time ``utc``.

    Only meaningful when the two are less than 24 hours apart, and a leap
    second between them can skew the answer by one; confirm with
    ``check_utc_timestamp``.
    """
    return intraday_secs_diff(utc, platform.utc_civil_time(timestamp))


def check_utc_timestamp(
    timestamp: int,
    utc: CivilTime,
    *,
    platform: Platform = SYSTEM,
) -> tuple[bool, int]:
    """
    Check that ``timestamp`` converts to the UTC time ``utc``.

    Returns ``(agrees, secs_diff)`` where ``secs_diff`` is 0 on agreement
    and otherwise the intraday difference from ``utc`` to the timestamp's
    UTC time.
    """
    observed = platform.utc_civil_time(timestamp)
    if compare(utc, observed) == 0:
        return True, 0
    return False, intraday_secs_diff(utc, observed)


def utc_timestamp(utc: CivilTime, *, platform: Platform = SYSTEM) -> int:
    """
    Platform timestamp for ``utc``, a ``CivilTime`` read as UTC.

    The platform's local-time conversion gives an anchor within a day of the
    answer. One arithmetic correction normally lands on it; if a leap second
    sits in between, the neighbours one second either side are tried.

    Raises ``ClockError`` if the platform fails and ``ResolutionError`` if
    no candidate matches.
    """
    target = utc.copy()

    timestamp = platform.local_timestamp(target)
    secs_diff = utc_timestamp_sec_diff(timestamp, target, platform=platform)
    logger.debug(f"Anchor {timestamp} for {target} is off by {secs_diff}s.")
    if secs_diff == 0:
        return timestamp

    one_sec = second_unit(platform=platform)
    timestamp -= one_sec * secs_diff
    if utc_timestamp_sec_diff(timestamp, target, platform=platform) == 0:
        return timestamp

    for neighbour in (timestamp + one_sec, timestamp - one_sec):
        if utc_timestamp_sec_diff(neighbour, target, platform=platform) == 0:
            logger.warning(
                f"Resolved {target} to neighbour {neighbour} of {timestamp}; "
                "a leap second or calendar anomaly is nearby."
            )
            return neighbour

    logger.error(f"UTC resolution of {target} diverged at {timestamp}.")
    raise ResolutionError(target, timestamp)
