from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .daynight import (
    day_night_split, day_part_arcs, segment_for_part, sun_times, time_of_day_colors, time_of_day_for_part,
)
from .geometry import current_day_marker
from .leaders import leader_for_day, leader_name_for_day, monthly_leader
from .model import (
    CalendarCoordinate, DayNightSplit, LeaderQuadrant, RotationSet, TickMark, WheelGeometry,
)
from .rotation import compute_rotations
from .ticks import solar_ticks, week_ticks


@dataclass(frozen=True)
class WheelFrame:
    """Everything a renderer needs for one redraw."""
    coordinate: CalendarCoordinate
    rotations: RotationSet
    geometry: WheelGeometry
    solar_ticks: Tuple[TickMark, ...]
    week_ticks: Tuple[TickMark, ...]
    leader: LeaderQuadrant
    day_night: DayNightSplit
    segment: str

    def to_dict(self, include_ticks: bool = True) -> Dict:
        data = {
            "coordinate": self.coordinate.to_dict(),
            "rotations": self.rotations.to_dict(),
            "geometry": self.geometry.to_dict(),
            "leader": self.leader.to_dict(),
            "leader_of_day": leader_name_for_day(self.coordinate.day_of_year),
            "monthly_leader": monthly_leader(self.coordinate.month),
            "day_night": self.day_night.to_dict(),
            "day_part_arcs": day_part_arcs(self.day_night),
            "sun_times": sun_times(self.day_night),
            "segment": self.segment,
            "time_of_day": time_of_day_for_part(self.coordinate.part_of_day),
            "time_of_day_colors": time_of_day_colors(self.coordinate.part_of_day),
            "current_day_marker": current_day_marker(self.geometry, self.coordinate),
        }
        if include_ticks:
            data["solar_ticks"] = _ticks_to_list(self.solar_ticks)
            data["week_ticks"] = _ticks_to_list(self.week_ticks)
        return data


def _ticks_to_list(ticks) -> List[Dict]:
    return [tick.to_dict() for tick in ticks]


def build_frame(
    coordinate: CalendarCoordinate,
    geometry: WheelGeometry,
    progress: Optional[float] = None,
    daynight_model: Optional[str] = None,
    starting_weekday: Optional[int] = None,
) -> WheelFrame:
    return WheelFrame(
        coordinate=coordinate,
        rotations=compute_rotations(coordinate, progress),
        geometry=geometry,
        solar_ticks=solar_ticks(coordinate.day_of_year, starting_weekday),
        week_ticks=week_ticks(coordinate.day_of_year, coordinate.day_of_week),
        leader=leader_for_day(coordinate.day_of_year),
        day_night=day_night_split(coordinate.day_of_year, daynight_model),
        segment=segment_for_part(coordinate.part_of_day),
    )
