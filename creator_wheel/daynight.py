"""
Seasonal day/night length for the 18-part day.

The default model follows the sine curve the wheel has always used, anchored on
day 91 with a 182-day period: days 91 and 182 come out at 9/9 and the curve runs
twice per year, with extremes near days 45, 136, 227 and 318. The "solstice"
model is the single-cycle alternative in which day 91 is the longest day (12/6)
and day 273 the shortest (6/12). Which of the two the product intends is still
open, so both are kept behind WHEEL_DAYNIGHT_MODEL.
"""
import math
from typing import Dict, List

from . import config
from .model import (
    DayNightSplit, DAY_PARTS, MINUTES_PER_PART, CREATOR_YEAR_DAYS,
    normalize_day_of_year, normalize_part, normalize_minute,
)

MODEL_AS_DERIVED = "as-derived"
MODEL_SOLSTICE = "solstice"
MODELS = (MODEL_AS_DERIVED, MODEL_SOLSTICE)

EQUINOX_DAY_PARTS = 9
SEASONAL_SWING = 3
MIN_DAY_PARTS = EQUINOX_DAY_PARTS - SEASONAL_SWING
MAX_DAY_PARTS = EQUINOX_DAY_PARTS + SEASONAL_SWING

DEGREES_PER_PART = 360 / DAY_PARTS
# Erev and Boqer each span 2 hours (1.5 parts) either side of the night
TWILIGHT_PARTS = 1.5

# Coarse fixed labeling of the 18 parts; independent from the seasonal split
SEGMENTS = (
    ("Day", 1, 4),
    ("Evening", 5, 8),
    ("Night", 9, 13),
    ("Morning", 14, 18),
)


def seasonal_variation(day_of_year, model: str = None) -> float:
    """Position on the seasonal curve in [-1, 1]."""
    model = (model or config.DAYNIGHT_MODEL).strip().lower()
    day = normalize_day_of_year(day_of_year)
    if model == MODEL_AS_DERIVED:
        return math.sin(((day - 91) / 182) * 2 * math.pi)
    if model == MODEL_SOLSTICE:
        return math.cos(((day - 91) % CREATOR_YEAR_DAYS) / CREATOR_YEAR_DAYS * 2 * math.pi)
    raise ValueError(f"unknown day/night model: {model!r} (expected one of {', '.join(MODELS)})")


def day_night_split(day_of_year, model: str = None) -> DayNightSplit:
    variation = seasonal_variation(day_of_year, model)
    day_parts = int(math.floor(EQUINOX_DAY_PARTS + variation * SEASONAL_SWING + 0.5))
    day_parts = max(MIN_DAY_PARTS, min(MAX_DAY_PARTS, day_parts))
    return DayNightSplit(day_parts=day_parts, night_parts=DAY_PARTS - day_parts)


def sun_times(split: DayNightSplit) -> Dict:
    """Sunrise and sunset for a split, with the night centred on midnight.

    At 9/9 this gives 06:00 and 18:00.
    """
    day_minutes = split.day_parts * MINUTES_PER_PART
    night_minutes = split.night_parts * MINUTES_PER_PART
    sunrise = night_minutes / 2
    sunset = sunrise + day_minutes
    return {
        "sunrise": {"hour": int(sunrise // 60) % 24, "minute": int(sunrise % 60)},
        "sunset": {"hour": int(sunset // 60) % 24, "minute": int(sunset % 60)},
        "sunrise_minutes": sunrise % 1440,
        "sunset_minutes": sunset % 1440,
    }


def day_part_arcs(split: DayNightSplit, start_angle: float = 90.0) -> List[Dict]:
    """Yôm/Erev/Laylah/Boqer arcs (degrees) for the day-parts ring."""
    twilight = TWILIGHT_PARTS * DEGREES_PER_PART
    arcs = [
        ("Yôm", "Day", split.day_parts * DEGREES_PER_PART, "#fbbf24"),
        ("Erev", "Evening", twilight, "#f97316"),
        ("Laylah", "Night", split.night_parts * DEGREES_PER_PART - 2 * twilight, "#1e3a8a"),
        ("Boqer", "Morning", twilight, "#fb923c"),
    ]
    result = []
    current = start_angle
    for name, label, degrees, color in arcs:
        result.append({
            "name": name,
            "label": label,
            "start_angle": current,
            "end_angle": current + degrees,
            "degrees": degrees,
            "color": color,
        })
        current += degrees
    return result


def segment_for_part(part) -> str:
    part = normalize_part(part)
    for label, first, last in SEGMENTS:
        if first <= part <= last:
            return label
    return SEGMENTS[-1][0]


# Display mood of each part, with its background/accent colours
TIMES_OF_DAY = (
    ("dawn", 1, 2),
    ("day", 3, 11),
    ("golden-hour", 12, 14),
    ("dusk", 15, 16),
    ("night", 17, 18),
)

TIME_OF_DAY_COLORS = {
    "dawn": {"background": "#2b1b3d", "accent": "#d96b66"},
    "day": {"background": "#f0f4f8", "accent": "#4a90e2"},
    "golden-hour": {"background": "#fff4e6", "accent": "#f5a76c"},
    "dusk": {"background": "#2c1b3d", "accent": "#9b6fcc"},
    "night": {"background": "#0f1423", "accent": "#00d4ff"},
}


def time_of_day_for_part(part) -> str:
    part = normalize_part(part)
    for name, first, last in TIMES_OF_DAY:
        if first <= part <= last:
            return name
    return TIMES_OF_DAY[-1][0]


def time_of_day_colors(part) -> Dict:
    """Background and accent colours for the hub, e.g. {"background": ..., "accent": ...}."""
    return dict(TIME_OF_DAY_COLORS[time_of_day_for_part(part)])


def _ordinal(n: int) -> str:
    if 11 <= n % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def format_part_time(part, minute) -> str:
    """Hub text for an 18-part time, e.g. "12th part 14th min"."""
    part = normalize_part(part)
    minute = normalize_minute(minute)
    return f"{part}{_ordinal(part)} part {minute}{_ordinal(minute)} min"
