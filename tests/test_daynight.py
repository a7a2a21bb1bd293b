import pytest

from creator_wheel.daynight import (
    MODEL_SOLSTICE, day_night_split, day_part_arcs, format_part_time, seasonal_variation,
    segment_for_part, sun_times, time_of_day_colors, time_of_day_for_part,
)
from creator_wheel.model import DayNightSplit


class TestDayNightSplit:

    def test_parts_always_sum_to_eighteen(self):
        for day in range(1, 367):
            split = day_night_split(day)
            assert split.day_parts + split.night_parts == 18

    def test_day_parts_bounded(self):
        for model in (None, MODEL_SOLSTICE):
            for day in range(1, 367):
                assert 6 <= day_night_split(day, model).day_parts <= 12

    def test_symmetric_around_day_182_for_small_offsets(self):
        for k in range(0, 5):
            assert day_night_split(182 + k) == day_night_split(182 - k)

    def test_day_91_is_even(self):
        split = day_night_split(91)
        assert (split.day_parts, split.night_parts) == (9, 9)

    def test_out_of_range_days_are_clamped(self):
        assert day_night_split(0) == day_night_split(1)
        assert day_night_split(1000) == day_night_split(366)
        assert day_night_split(None) == day_night_split(1)
        assert day_night_split(float("nan")) == day_night_split(1)

    def test_solstice_model_extremes(self):
        assert day_night_split(91, MODEL_SOLSTICE) == DayNightSplit(12, 6)
        assert day_night_split(273, MODEL_SOLSTICE) == DayNightSplit(6, 12)

    def test_unknown_model_rejected(self):
        with pytest.raises(ValueError):
            seasonal_variation(10, "lunar")


class TestSunTimes:

    def test_even_split_gives_six_and_eighteen(self):
        times = sun_times(DayNightSplit(9, 9))
        assert times["sunrise"] == {"hour": 6, "minute": 0}
        assert times["sunset"] == {"hour": 18, "minute": 0}

    def test_long_day(self):
        times = sun_times(DayNightSplit(12, 6))
        assert times["sunrise_minutes"] == 240
        assert times["sunset_minutes"] == 1200


class TestDayPartArcs:

    @pytest.mark.parametrize("day_parts", [6, 9, 12])
    def test_arcs_cover_the_circle(self, day_parts):
        arcs = day_part_arcs(DayNightSplit(day_parts, 18 - day_parts))
        assert [arc["name"] for arc in arcs] == ["Yôm", "Erev", "Laylah", "Boqer"]
        assert sum(arc["degrees"] for arc in arcs) == pytest.approx(360)
        assert arcs[0]["start_angle"] == 90
        assert arcs[-1]["end_angle"] == pytest.approx(450)

    def test_day_arc_follows_split(self):
        arcs = day_part_arcs(DayNightSplit(12, 6))
        assert arcs[0]["degrees"] == pytest.approx(240)
        assert arcs[2]["degrees"] == pytest.approx(60)


class TestSegments:

    @pytest.mark.parametrize("part,label", [
        (1, "Day"), (4, "Day"), (5, "Evening"), (8, "Evening"),
        (9, "Night"), (13, "Night"), (14, "Morning"), (18, "Morning"),
    ])
    def test_fixed_labels(self, part, label):
        assert segment_for_part(part) == label

    def test_segment_ignores_season(self):
        # same part, very different splits
        assert day_night_split(91, MODEL_SOLSTICE) != day_night_split(273, MODEL_SOLSTICE)
        assert segment_for_part(6) == "Evening"

    @pytest.mark.parametrize("part,mood", [
        (1, "dawn"), (2, "dawn"), (3, "day"), (11, "day"), (12, "golden-hour"),
        (14, "golden-hour"), (15, "dusk"), (16, "dusk"), (17, "night"), (18, "night"),
    ])
    def test_time_of_day(self, part, mood):
        assert time_of_day_for_part(part) == mood

    def test_time_of_day_colors(self):
        assert time_of_day_colors(1) == {"background": "#2b1b3d", "accent": "#d96b66"}
        assert time_of_day_colors(30)["accent"] == "#00d4ff"

    def test_format_part_time(self):
        assert format_part_time(12, 14) == "12th part 14th min"
        assert format_part_time(1, 2) == "1st part 2nd min"
        assert format_part_time(3, 23) == "3rd part 23rd min"
