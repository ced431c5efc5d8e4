"""
tests/clock/test_probe.py

Covers:
  - Unit measurement on second-tick and millisecond-tick platforms
  - Independence from the local offset
  - The system clock on POSIX
  - Platform failure during probing
"""

import os

import pytest

from civiltime import ClockError
from civiltime.clock import Platform, day_unit, hour_unit, second_unit


class TestFakePlatform:

    def test_seconds(self, platform_factory):
        platform = platform_factory()
        assert second_unit(platform=platform) == 1
        assert hour_unit(platform=platform) == 3600
        assert day_unit(platform=platform) == 86400

    def test_milliseconds(self, ms_platform):
        assert second_unit(platform=ms_platform) == 1000
        assert hour_unit(platform=ms_platform) == 3_600_000
        assert day_unit(platform=ms_platform) == 86_400_000

    @pytest.mark.parametrize("offset", [-12 * 3600, -3600, 0, 19800, 14 * 3600])
    def test_offset_does_not_matter(self, platform_factory, offset):
        platform = platform_factory(ticks=10, local_offset=offset)
        assert second_unit(platform=platform) == 10
        assert day_unit(platform=platform) == 864_000

    def test_units_consistent(self, ms_platform):
        one_sec = second_unit(platform=ms_platform)
        assert hour_unit(platform=ms_platform) == 3600 * one_sec
        assert day_unit(platform=ms_platform) == 24 * hour_unit(platform=ms_platform)

    def test_probe_reads_reference_datum(self):
        seen = []

        def mktime(st):
            seen.append(st[:6])
            return float(len(seen))

        second_unit(platform=Platform(mktime=mktime))
        assert seen == [(1930, 1, 2, 12, 0, 0), (1930, 1, 2, 12, 0, 1)]


@pytest.mark.skipif(os.name != "posix", reason="time_t is in seconds on POSIX")
class TestSystemPlatform:

    def test_posix_units(self):
        assert second_unit() == 1
        assert hour_unit() == 3600
        assert day_unit() == 86400


class TestProbeFailure:

    @pytest.mark.parametrize("probe", [day_unit, hour_unit, second_unit])
    def test_clock_error(self, broken_mktime, probe):
        with pytest.raises(ClockError):
            probe(platform=broken_mktime)
