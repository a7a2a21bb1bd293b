import math

import pytest

from creator_wheel.model import CalendarCoordinate
from creator_wheel.rotation import (
    SUN_DEGREES_PER_DAY, WEEK_RING_DRIFT_PER_DAY,
    compute_rotations, days_rotation, day_parts_rotation, leader_rotation, month_days_rotation,
    normalize_angle, progress_through_day, relative_drift, sun_rotation, weeks_rotation,
)


def test_day_one_part_one():
    rotations = compute_rotations(CalendarCoordinate())
    assert rotations.sun == pytest.approx(0)
    assert rotations.leaders == pytest.approx(0)
    assert rotations.day_parts == pytest.approx(0)
    assert rotations.days == pytest.approx(0)


def test_progress_through_day():
    assert progress_through_day(1, 1) == 0
    assert progress_through_day(10, 1) == pytest.approx(0.5)
    assert progress_through_day(18, 80) == pytest.approx(1439 / 1440)


class TestSunRotation:

    @pytest.mark.parametrize("day", [1, 90, 200, 365])
    def test_one_day_step(self, day):
        step = sun_rotation(day + 1, 0.0) - sun_rotation(day, 0.0)
        assert step == pytest.approx(-360 / 366)

    @pytest.mark.parametrize("day", [1, 90, 200, 365])
    def test_no_jump_across_day_boundary(self, day):
        gap = sun_rotation(day + 1, 0.0) - sun_rotation(day, 0.999)
        assert gap == pytest.approx(-0.001 * SUN_DEGREES_PER_DAY)

    def test_monotonic_within_day(self):
        angles = [sun_rotation(50, p / 100) for p in range(100)]
        assert all(b < a for a, b in zip(angles, angles[1:]))

    def test_clamps_input(self):
        assert sun_rotation(0) == sun_rotation(1)
        assert sun_rotation(1000) == sun_rotation(366)
        assert not math.isnan(sun_rotation(None, float("nan")))
        assert sun_rotation(10, 5) == sun_rotation(10, 1.0)
        assert sun_rotation(10, -1) == sun_rotation(10, 0.0)


def test_step_rings():
    assert leader_rotation(3) == -270
    assert weeks_rotation(182) == pytest.approx(-180)
    assert days_rotation(7) == pytest.approx(-(6 / 7) * 360)
    assert day_parts_rotation(10) == pytest.approx(-180)
    assert month_days_rotation(1) == 0


def test_day_183_sabbath_rotation():
    coordinate = CalendarCoordinate(day_of_year=183, day_of_week=7, month=7, day_of_month=1)
    rotations = compute_rotations(coordinate)
    assert rotations.days == pytest.approx(-(6 / 7) * 360)
    assert rotations.leaders == -180


class TestWeekRingDrift:

    def test_drift_per_day(self):
        assert WEEK_RING_DRIFT_PER_DAY == pytest.approx(360 / 364 - 360 / 366)
        for day in (1, 100, 300):
            week_step = weeks_rotation(day + 1) - weeks_rotation(day)
            sun_step = sun_rotation(day + 1) - sun_rotation(day)
            assert week_step - sun_step == pytest.approx(-WEEK_RING_DRIFT_PER_DAY)

    def test_drift_over_a_year_is_two_days_of_sun(self):
        assert relative_drift(364) == pytest.approx(2 * SUN_DEGREES_PER_DAY)


def test_normalize_angle():
    assert normalize_angle(-90) == 270
    assert normalize_angle(720) == 0
