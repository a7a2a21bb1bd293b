"""
Value types shared by the wheel engine, plus the normalization helpers that keep
upstream values out of the trigonometry when they are missing or out of range.
"""
import math
from dataclasses import dataclass, asdict
from typing import Dict, Optional, Tuple

from . import config

YEAR_TICKS = 366        # solar ring: 364 Creator days + 2 days out of time
CREATOR_YEAR_DAYS = 364  # week ring and day rings
WEEK_DAYS = 7
DAY_PARTS = 18
MINUTES_PER_PART = 80
MINUTES_PER_DAY = DAY_PARTS * MINUTES_PER_PART  # 1440
MONTH_DAY_POSITIONS = 31
WEEKS_PER_YEAR = 52
SABBATH = 7

MONTHS_BASE = [30, 30, 31, 30, 30, 31, 30, 30, 31, 30, 30, 31]

RING_NAMES = ("sun", "leaders", "month_days", "weeks", "day_parts", "days")


def _as_int(value, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return int(math.floor(number))


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def normalize_day_of_year(value) -> int:
    return _clamp(_as_int(value, 1), 1, YEAR_TICKS)


def normalize_weekday(value) -> int:
    return _clamp(_as_int(value, 1), 1, WEEK_DAYS)


def normalize_part(value) -> int:
    return _clamp(_as_int(value, 1), 1, DAY_PARTS)


def normalize_minute(value) -> int:
    return _clamp(_as_int(value, 1), 1, MINUTES_PER_PART)


def weekday_for_day(day_number: int, starting_weekday: int = None) -> int:
    """Weekday (1..7) of a day of the year when day 1 falls on `starting_weekday`."""
    if starting_weekday is None:
        starting_weekday = config.STARTING_WEEKDAY
    return ((day_number - 1 + starting_weekday - 1) % WEEK_DAYS) + 1


def month_and_day(day_of_year: int) -> Tuple[int, int]:
    """Split a day of the year on the 30/30/31 month pattern.

    Days past 364 belong to the added week and stay in month 12, pinned to its
    last position on the 31-slot month ring.
    """
    remaining = normalize_day_of_year(day_of_year)
    for index, length in enumerate(MONTHS_BASE):
        if remaining <= length:
            return index + 1, remaining
        remaining -= length
    return 12, MONTHS_BASE[-1]


def week_of_year(day_of_year: int) -> int:
    return min(WEEKS_PER_YEAR, (normalize_day_of_year(day_of_year) - 1) // WEEK_DAYS + 1)


@dataclass(frozen=True)
class CalendarCoordinate:
    day_of_year: int = 1
    day_of_month: int = 1
    month: int = 1
    week_of_year: int = 1
    day_of_week: int = 1
    part_of_day: int = 1
    minute: int = 1
    year: Optional[int] = None
    added_week: bool = False

    @property
    def is_sabbath(self) -> bool:
        return self.day_of_week == SABBATH

    @property
    def progress_through_day(self) -> float:
        return ((self.part_of_day - 1) * MINUTES_PER_PART + (self.minute - 1)) / MINUTES_PER_DAY

    @property
    def coarse_key(self) -> tuple:
        return (self.year, self.day_of_year, self.day_of_week)

    def to_dict(self) -> Dict:
        data = asdict(self)
        data["progress_through_day"] = self.progress_through_day
        data["is_sabbath"] = self.is_sabbath
        return data


def _field(mapping, *names):
    if not mapping:
        return None
    for name in names:
        value = mapping.get(name)
        if value is not None:
            return value
    return None


def coordinate_from_fields(calendar: Optional[Dict] = None, day_time: Optional[Dict] = None) -> CalendarCoordinate:
    """Build a coordinate from the two upstream results.

    Either result may be missing or partial; absent fields fall back to day 1,
    part 1 and to values derived from the day of the year.
    """
    day_of_year = normalize_day_of_year(_field(calendar, "day_of_year", "dayOfYear"))
    derived_month, derived_day = month_and_day(day_of_year)

    weekday_raw = _field(calendar, "week_day", "weekDay", "day_of_week", "dayOfWeek")
    day_of_week = normalize_weekday(weekday_raw) if weekday_raw is not None else weekday_for_day(day_of_year)

    month = _clamp(_as_int(_field(calendar, "month"), derived_month), 1, 12)
    day_of_month = _clamp(_as_int(_field(calendar, "day_of_month", "dayOfMonth"), derived_day), 1, MONTH_DAY_POSITIONS)

    year = _field(calendar, "year")
    added_week = bool(_field(calendar, "added_week", "addedWeek")) or day_of_year > CREATOR_YEAR_DAYS

    return CalendarCoordinate(
        day_of_year=day_of_year,
        day_of_month=day_of_month,
        month=month,
        week_of_year=week_of_year(day_of_year),
        day_of_week=day_of_week,
        part_of_day=normalize_part(_field(day_time, "part", "part_of_day", "partOfDay")),
        minute=normalize_minute(_field(day_time, "minute")),
        year=_as_int(year, None) if year is not None else None,
        added_week=added_week,
    )


@dataclass(frozen=True)
class DayNightSplit:
    day_parts: int
    night_parts: int

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class LeaderQuadrant:
    index: int
    name: str
    representative: str
    color: str
    creature: str = ""
    months: Tuple[int, ...] = ()

    def to_dict(self) -> Dict:
        data = asdict(self)
        data["months"] = list(self.months)
        return data


@dataclass(frozen=True)
class RingGeometry:
    outer_radius: float
    inner_radius: float

    @property
    def mid_radius(self) -> float:
        return (self.outer_radius + self.inner_radius) / 2

    @property
    def width(self) -> float:
        return self.outer_radius - self.inner_radius

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class WheelGeometry:
    size: float
    sun: RingGeometry
    leaders: RingGeometry
    month_days: RingGeometry
    weeks: RingGeometry
    day_parts: RingGeometry
    days: RingGeometry
    center_hub: float
    background: float = 0.0

    @property
    def center(self) -> Tuple[float, float]:
        return (self.size / 2, self.size / 2)

    def ring(self, name: str) -> RingGeometry:
        if name not in RING_NAMES:
            raise ValueError(f"unknown ring: {name}")
        return getattr(self, name)

    def to_dict(self) -> Dict:
        data = {"size": self.size, "center_hub": self.center_hub, "background": self.background}
        for name in RING_NAMES:
            data[name] = self.ring(name).to_dict()
        return data


@dataclass(frozen=True)
class TickMark:
    index: int
    day_number: int
    angle_degrees: float
    weekday: int
    is_current_day: bool
    is_sabbath: bool
    weekday_class: str
    era_boundary: bool
    is_out_of_time: bool = False

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class RotationSet:
    sun: float
    leaders: float
    weeks: float
    day_parts: float
    days: float
    month_days: float = 0.0

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class WheelOverride:
    """Explicit coordinate values that bypass the live clock (tests, screenshots)."""
    day_of_year: Optional[int] = None
    day_of_week: Optional[int] = None
    part: Optional[int] = None
    minute: Optional[int] = None
    day_of_month: Optional[int] = None
    month: Optional[int] = None
    year: Optional[int] = None

    def to_coordinate(self) -> CalendarCoordinate:
        calendar = {
            "day_of_year": self.day_of_year,
            "week_day": self.day_of_week,
            "day_of_month": self.day_of_month,
            "month": self.month,
            "year": self.year,
        }
        day_time = {"part": self.part, "minute": self.minute}
        return coordinate_from_fields(calendar, day_time)
