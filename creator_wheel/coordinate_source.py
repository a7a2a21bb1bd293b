"""
Wall-clock instant → raw Creator calendar fields.

Policy:
- The Creator day begins at local SUNRISE; part 1 is the first 80 minutes after it.
- The year starts on the civil WEDNESDAY nearest the March equinox (anchor
  20-Mar 21:24 UTC); year day 1 is week day 1.
- Years run 364 days, or 371 when the added week is needed; days past 364 are
  flagged `added_week` and pinned to 366 for the rings.
- Year number mapped so that the year starting in Gregorian 2025 is Enoch 5996.
"""
from datetime import date, datetime, time, timedelta
from typing import Dict, Optional, Tuple

import pytz
import swisseph as swe
from astral import LocationInfo
from astral.sun import sunrise as astral_sunrise

from . import config
from .debug import debug_any
from .model import (
    CalendarCoordinate, CREATOR_YEAR_DAYS, DAY_PARTS, MINUTES_PER_DAY, MINUTES_PER_PART, YEAR_TICKS,
    coordinate_from_fields, month_and_day,
)

EQUINOX_ANCHOR = (3, 20, 21 + 24 / 60)

# Detectar índice de miércoles en runtime (evita supuestos de mapeo del backend de Swiss Ephemeris)
WEDNESDAY_INDEX = swe.day_of_week(swe.julday(2025, 3, 19, 0.0))  # 2025-03-19 es miércoles


def _dow_index(civil_day: date) -> int:
    """Swiss Ephemeris weekday index of a civil day, taken at 0h UT."""
    return swe.day_of_week(swe.julday(civil_day.year, civil_day.month, civil_day.day, 0.0))


def equinox_date(year: int) -> date:
    y, m, d, _h = swe.revjul(swe.julday(year, *EQUINOX_ANCHOR))
    return date(int(y), int(m), int(d))


def year_start_date(year: int) -> date:
    """Civil date of Creator day 1 for the year whose equinox falls in `year`."""
    equinox = equinox_date(year)

    before = equinox
    while _dow_index(before) != WEDNESDAY_INDEX:
        before -= timedelta(days=1)

    after = equinox
    while _dow_index(after) != WEDNESDAY_INDEX:
        after += timedelta(days=1)

    if (equinox - before) < (after - equinox):
        return before
    return after


def creator_year_position(civil_day: date) -> Tuple[date, int]:
    """(start of the containing Creator year, 1-based day number within it)."""
    start = year_start_date(civil_day.year)
    if civil_day < start:
        start = year_start_date(civil_day.year - 1)
    return start, (civil_day - start).days + 1


class CalendarCoordinateSource:
    """Converts instants to Creator calendar fields for one location."""

    def __init__(self, latitude=None, longitude=None, timezone=None):
        self.latitude = config.REFERENCE_LATITUDE if latitude is None else float(latitude)
        self.longitude = config.REFERENCE_LONGITUDE if longitude is None else float(longitude)
        tz_str = timezone or config.REFERENCE_TIMEZONE
        try:
            self.tz = pytz.timezone(tz_str)
        except pytz.UnknownTimeZoneError:
            debug_any(tz_str, "Zona horaria desconocida, usando UTC")
            self.tz = pytz.UTC
        self.location = LocationInfo(name="Wheel", region="Wheel", timezone=self.tz.zone,
                                     latitude=self.latitude, longitude=self.longitude)

    def localize(self, instant: Optional[datetime] = None) -> datetime:
        """Aware local datetime for an instant; naive instants are taken as UTC."""
        if instant is None:
            instant = datetime.now(pytz.UTC)
        elif instant.tzinfo is None or instant.tzinfo.utcoffset(instant) is None:
            instant = pytz.UTC.localize(instant.replace(tzinfo=None))
        return instant.astimezone(self.tz)

    def sunrise(self, civil_day: date) -> datetime:
        try:
            return astral_sunrise(self.location.observer, date=civil_day, tzinfo=self.tz)
        except ValueError as exc:
            # Sol que no sale / no se pone (día o noche polar): amanecer fijo
            debug_any(exc, f"Sin amanecer para {civil_day}")
            midnight = self.tz.localize(datetime.combine(civil_day, time(0, 0)))
            return midnight + timedelta(minutes=config.FALLBACK_SUNRISE_MINUTES)

    def creator_day_start(self, instant: Optional[datetime] = None) -> Tuple[date, datetime, datetime]:
        """(civil date the Creator day began on, that sunrise, local instant)."""
        local = self.localize(instant)
        civil_day = local.date()
        start = self.sunrise(civil_day)
        if local < start:
            civil_day -= timedelta(days=1)
            start = self.sunrise(civil_day)
        return civil_day, start, local

    def date_to_calendar(self, instant: Optional[datetime] = None) -> Dict:
        civil_day, _start, _local = self.creator_day_start(instant)
        year_start, day_number = creator_year_position(civil_day)
        added_week = day_number > CREATOR_YEAR_DAYS
        day_of_year = min(day_number, YEAR_TICKS)
        month, day_of_month = month_and_day(day_of_year)
        return {
            "year": config.REFERENCE_ENOCH_YEAR + (year_start.year - config.REFERENCE_GREGORIAN_YEAR),
            "day_of_year": day_of_year,
            "day_number": day_number,
            "week_day": (day_number - 1) % 7 + 1,
            "month": month,
            "day_of_month": day_of_month,
            "added_week": added_week,
            "year_start": year_start.isoformat(),
        }

    def date_to_day_time(self, instant: Optional[datetime] = None) -> Dict:
        _civil_day, start, local = self.creator_day_start(instant)
        elapsed = (local - start).total_seconds() / 60
        # un día entre amaneceres puede durar algo más o menos de 1440 min
        elapsed = max(0.0, min(elapsed, MINUTES_PER_DAY - 1e-6))
        part = min(DAY_PARTS, int(elapsed // MINUTES_PER_PART) + 1)
        minute = int(elapsed % MINUTES_PER_PART) + 1
        return {
            "part": part,
            "minute": minute,
            "elapsed_minutes": elapsed,
            "sunrise": start.isoformat(),
        }

    def coordinate(self, instant: Optional[datetime] = None) -> CalendarCoordinate:
        return coordinate_from_fields(self.date_to_calendar(instant), self.date_to_day_time(instant))


_default_source = None


def default_source() -> CalendarCoordinateSource:
    global _default_source
    if _default_source is None:
        _default_source = CalendarCoordinateSource()
    return _default_source


def date_to_calendar(instant: Optional[datetime] = None) -> Dict:
    return default_source().date_to_calendar(instant)


def date_to_day_time(instant: Optional[datetime] = None) -> Dict:
    return default_source().date_to_day_time(instant)
