import pytest

from creator_wheel.model import (
    CalendarCoordinate, WheelOverride, coordinate_from_fields, month_and_day, normalize_day_of_year,
    normalize_minute, normalize_part, normalize_weekday, week_of_year, weekday_for_day,
)


@pytest.mark.parametrize("value,expected", [
    (None, 1), ("abc", 1), (float("nan"), 1), (True, 1), (0, 1), (-5, 1), (400, 366), ("12", 12), (12.7, 12),
])
def test_normalize_day_of_year(value, expected):
    assert normalize_day_of_year(value) == expected


def test_other_normalizers_clamp():
    assert normalize_weekday(9) == 7
    assert normalize_part(0) == 1
    assert normalize_part(30) == 18
    assert normalize_minute(81) == 80
    assert normalize_minute(None) == 1


@pytest.mark.parametrize("day,expected", [
    (1, (1, 1)), (30, (1, 30)), (31, (2, 1)), (91, (3, 31)), (92, (4, 1)), (364, (12, 31)), (366, (12, 31)),
])
def test_month_and_day(day, expected):
    assert month_and_day(day) == expected


def test_week_of_year_and_weekday():
    assert week_of_year(1) == 1
    assert week_of_year(8) == 2
    assert week_of_year(364) == 52
    assert week_of_year(366) == 52
    assert weekday_for_day(7, 1) == 7
    assert weekday_for_day(8, 1) == 1


class TestCoordinateFromFields:

    def test_missing_results_default(self):
        coordinate = coordinate_from_fields(None, None)
        assert coordinate.day_of_year == 1
        assert coordinate.part_of_day == 1
        assert coordinate.minute == 1
        assert coordinate.year is None

    def test_camel_case_fields(self):
        coordinate = coordinate_from_fields(
            {"dayOfYear": 45, "weekDay": 3, "year": 5996},
            {"part": 7, "minute": 12},
        )
        assert coordinate.day_of_year == 45
        assert coordinate.day_of_week == 3
        assert (coordinate.month, coordinate.day_of_month) == (2, 15)
        assert coordinate.part_of_day == 7
        assert coordinate.year == 5996

    def test_days_out_of_time(self):
        coordinate = coordinate_from_fields({"day_of_year": 365}, {})
        assert coordinate.added_week
        assert coordinate.month == 12

    def test_sabbath_and_progress(self):
        coordinate = CalendarCoordinate(day_of_week=7, part_of_day=10, minute=1)
        assert coordinate.is_sabbath
        assert coordinate.progress_through_day == pytest.approx(0.5)
        assert coordinate.to_dict()["is_sabbath"] is True

    def test_coarse_key_ignores_time_of_day(self):
        a = CalendarCoordinate(day_of_year=5, part_of_day=1)
        b = CalendarCoordinate(day_of_year=5, part_of_day=9, minute=30)
        assert a.coarse_key == b.coarse_key
        assert a.coarse_key != CalendarCoordinate(day_of_year=6).coarse_key


def test_override_to_coordinate():
    coordinate = WheelOverride(day_of_year=183, day_of_week=7, part=3).to_coordinate()
    assert coordinate.day_of_year == 183
    assert coordinate.day_of_week == 7
    assert coordinate.part_of_day == 3
    assert coordinate.month == 7
