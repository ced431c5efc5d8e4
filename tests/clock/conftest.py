"""
Fake platforms for the clock tests.

``make_platform`` builds a ``Platform`` whose ticks are ``ticks`` per second,
whose local time is ``local_offset`` seconds ahead of UTC, and whose UTC
conversion runs ``skew(seconds)`` seconds behind the true time (a positive
skew after some instant models an inserted leap second).
"""

import calendar
import time

import pytest

from civiltime.civil import CivilTime
from civiltime.clock import Platform


def make_platform(*, ticks=1, local_offset=0, skew=None):
    def mktime(st):
        return float((calendar.timegm(st) - local_offset) * ticks)

    def gmtime(ts):
        secs = ts // ticks
        lag = skew(secs) if skew is not None else 0
        return time.gmtime(secs - lag)

    return Platform(mktime=mktime, gmtime=gmtime)


def epoch_seconds(ct):
    return calendar.timegm(ct.to_struct_time())


@pytest.fixture
def platform_factory():
    return make_platform


@pytest.fixture
def target():
    """2024-02-29 12:00:00 UTC."""
    return CivilTime(year=124, month=1, day=29, hour=12)


@pytest.fixture
def target_secs(target):
    return epoch_seconds(target)


@pytest.fixture
def ms_platform():
    """Millisecond ticks, local time UTC+05:00."""
    return make_platform(ticks=1000, local_offset=5 * 3600)


@pytest.fixture
def broken_mktime():
    def mktime(st):
        raise OverflowError("mktime argument out of range")

    return Platform(mktime=mktime, gmtime=time.gmtime)


@pytest.fixture
def broken_gmtime():
    def gmtime(ts):
        raise OSError(75, "Value too large for defined data type")

    return Platform(mktime=time.mktime, gmtime=gmtime)
