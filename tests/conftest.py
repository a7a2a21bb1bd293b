"""
Shared fixtures for the wheel test suite.

Run with: python -m pytest tests -v
"""
import os
import sys
from datetime import datetime

import pytest
import pytz

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from creator_wheel.scheduler import ManualTimers, manual_clock


class FakeCoordinateSource:
    """Source whose answers are set by the test; can be made to fail."""

    def __init__(self, day_of_year=1, week_day=1, part=1, minute=1, year=5996):
        self.calendar = {"day_of_year": day_of_year, "week_day": week_day, "year": year}
        self.day_time = {"part": part, "minute": minute}
        self.fail = False
        self.calendar_reads = 0
        self.day_time_reads = 0

    def set_day(self, day_of_year, week_day):
        self.calendar = dict(self.calendar, day_of_year=day_of_year, week_day=week_day)

    def set_time(self, part, minute=1):
        self.day_time = {"part": part, "minute": minute}

    def date_to_calendar(self, instant):
        self.calendar_reads += 1
        if self.fail:
            raise RuntimeError("calendar backend unavailable")
        return dict(self.calendar)

    def date_to_day_time(self, instant):
        self.day_time_reads += 1
        if self.fail:
            raise RuntimeError("calendar backend unavailable")
        return dict(self.day_time)


@pytest.fixture
def fake_source():
    return FakeCoordinateSource()


@pytest.fixture
def source_factory():
    return FakeCoordinateSource


@pytest.fixture
def timers():
    return ManualTimers()


@pytest.fixture
def clock(timers):
    return manual_clock(timers, datetime(2025, 3, 19, 12, 0, tzinfo=pytz.UTC))
