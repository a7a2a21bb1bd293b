from functools import lru_cache
from typing import Optional, Tuple

from . import config
from .model import (
    TickMark, YEAR_TICKS, CREATOR_YEAR_DAYS, WEEK_DAYS, SABBATH,
    normalize_day_of_year, normalize_weekday, weekday_for_day,
)

SOLAR_ERA_BOUNDARIES = frozenset((91, 182, 273, YEAR_TICKS))
WEEK_ERA_BOUNDARIES = frozenset((91, 182, 273, CREATOR_YEAR_DAYS))

# Tick arrays kept per (day, weekday); enough for a live wheel plus a few overrides
TICK_CACHE_SIZE = 8

# Highlighted weekdays; any other weekday is "plain"
WEEKDAY_CLASSES = {
    SABBATH: "sabbath",
    1: "first",
    2: "second",
    4: "fourth",
}


def tick_angle(index: int, count: int) -> float:
    """Angle of tick `index` on a ring of `count` ticks, index 0 at 12 o'clock."""
    return (index / count) * 360 - 90


def weekday_class(weekday: int) -> str:
    return WEEKDAY_CLASSES.get(weekday, "plain")


@lru_cache(maxsize=TICK_CACHE_SIZE)
def _solar_ticks(day_of_year: int, starting_weekday: int) -> Tuple[TickMark, ...]:
    ticks = []
    for i in range(YEAR_TICKS):
        day_number = i + 1
        weekday = weekday_for_day(day_number, starting_weekday)
        ticks.append(TickMark(
            index=i,
            day_number=day_number,
            angle_degrees=tick_angle(i, YEAR_TICKS),
            weekday=weekday,
            is_current_day=day_number == day_of_year,
            is_sabbath=weekday == SABBATH,
            weekday_class=weekday_class(weekday),
            era_boundary=day_number in SOLAR_ERA_BOUNDARIES,
            is_out_of_time=day_number > CREATOR_YEAR_DAYS,
        ))
    return tuple(ticks)


def solar_ticks(day_of_year, starting_weekday: int = None) -> Tuple[TickMark, ...]:
    """The 366 ticks of the sun ring for the given current day."""
    if starting_weekday is None:
        starting_weekday = config.STARTING_WEEKDAY
    return _solar_ticks(normalize_day_of_year(day_of_year), normalize_weekday(starting_weekday))


@lru_cache(maxsize=TICK_CACHE_SIZE)
def _week_ticks(day_of_year: int, day_of_week: Optional[int]) -> Tuple[TickMark, ...]:
    ticks = []
    for i in range(CREATOR_YEAR_DAYS):
        day_number = i + 1
        if day_of_week is None:
            weekday = (day_number - 1) % WEEK_DAYS + 1
        else:
            # phase anchored on the live weekday at the current dot
            weekday = (day_of_week - 1 + (day_number - day_of_year)) % WEEK_DAYS + 1
        ticks.append(TickMark(
            index=i,
            day_number=day_number,
            angle_degrees=tick_angle(i, CREATOR_YEAR_DAYS),
            weekday=weekday,
            is_current_day=day_number == day_of_year,
            is_sabbath=weekday == SABBATH,
            weekday_class=weekday_class(weekday),
            era_boundary=day_number in WEEK_ERA_BOUNDARIES,
        ))
    return tuple(ticks)


def week_ticks(day_of_year, day_of_week=None) -> Tuple[TickMark, ...]:
    """The 364 dots of the week ring.

    Without a weekday every seventh dot is a Sabbath. With the live weekday the
    Sabbath dots follow it, so a coordinate that is out of phase with the fixed
    seven-day grid (after the days out of time) still lights the right dots.
    """
    weekday = normalize_weekday(day_of_week) if day_of_week is not None else None
    return _week_ticks(normalize_day_of_year(day_of_year), weekday)


def current_tick(ticks) -> Optional[TickMark]:
    for tick in ticks:
        if tick.is_current_day:
            return tick
    return None
