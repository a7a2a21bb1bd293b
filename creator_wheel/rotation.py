"""
Ring rotations for one instant.

Every ring turns backwards as time advances so the fixed markers stay where they
are. The sun ring is the only one that moves inside a day; the others step at
most once per their own period. The sun ring counts 366 ticks while the week
ring counts 364, so the two drift apart by WEEK_RING_DRIFT_PER_DAY every day.
That drift is how the days out of time show up on the wheel; keep it.
"""
import math

from .model import (
    CalendarCoordinate, RotationSet,
    YEAR_TICKS, CREATOR_YEAR_DAYS, WEEK_DAYS, DAY_PARTS, MINUTES_PER_PART, MINUTES_PER_DAY,
    MONTH_DAY_POSITIONS, normalize_day_of_year, normalize_part, normalize_minute, normalize_weekday,
)
from .leaders import leader_index

SUN_DEGREES_PER_DAY = 360 / YEAR_TICKS
WEEKS_DEGREES_PER_DAY = 360 / CREATOR_YEAR_DAYS
WEEK_RING_DRIFT_PER_DAY = WEEKS_DEGREES_PER_DAY - SUN_DEGREES_PER_DAY


def progress_through_day(part, minute) -> float:
    """Fraction of the day elapsed, in [0, 1), from the 18-part clock."""
    part = normalize_part(part)
    minute = normalize_minute(minute)
    return ((part - 1) * MINUTES_PER_PART + (minute - 1)) / MINUTES_PER_DAY


def _clamp_progress(progress) -> float:
    try:
        progress = float(progress)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(progress) or progress < 0:
        return 0.0
    return min(progress, 1.0)


def sun_rotation(day_of_year, progress=0.0) -> float:
    day = normalize_day_of_year(day_of_year)
    return -((day - 1 + _clamp_progress(progress)) / YEAR_TICKS) * 360


def leader_rotation(index: int) -> float:
    return -(index * 90)


def weeks_rotation(day_of_year) -> float:
    return -(normalize_day_of_year(day_of_year) / CREATOR_YEAR_DAYS) * 360


def days_rotation(day_of_week) -> float:
    return -((normalize_weekday(day_of_week) - 1) / WEEK_DAYS) * 360


def day_parts_rotation(part) -> float:
    return -((normalize_part(part) - 1) / DAY_PARTS) * 360


def month_days_rotation(day_of_month) -> float:
    day_of_month = max(1, min(MONTH_DAY_POSITIONS, int(day_of_month)))
    return -((day_of_month - 1) / MONTH_DAY_POSITIONS) * 360


def compute_rotations(coordinate: CalendarCoordinate, progress=None) -> RotationSet:
    """One angle per ring for the coordinate.

    `progress` defaults to the coordinate's own part/minute progress; a renderer
    that samples faster than the clock's minute resolution may pass its own.
    """
    if progress is None:
        progress = coordinate.progress_through_day
    return RotationSet(
        sun=sun_rotation(coordinate.day_of_year, progress),
        leaders=leader_rotation(leader_index(coordinate.day_of_year)),
        weeks=weeks_rotation(coordinate.day_of_year),
        day_parts=day_parts_rotation(coordinate.part_of_day),
        days=days_rotation(coordinate.day_of_week),
        month_days=month_days_rotation(coordinate.day_of_month),
    )


def relative_drift(days: float) -> float:
    """Degrees the week ring has gained on the sun ring after `days` days."""
    return days * WEEK_RING_DRIFT_PER_DAY


def normalize_angle(angle: float) -> float:
    """Fold an angle into [0, 360)."""
    angle = angle % 360.0
    return angle + 360.0 if angle < 0 else angle
