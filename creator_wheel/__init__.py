from .coordinate_source import CalendarCoordinateSource
from .daynight import day_night_split, segment_for_part
from .frame import WheelFrame, build_frame
from .geometry import build_geometry
from .leaders import leader_for_day, leader_index
from .model import CalendarCoordinate, WheelOverride, coordinate_from_fields
from .rotation import compute_rotations
from .scheduler import AsyncioTimers, LiveCoordinateScheduler, ManualTimers
from .ticks import solar_ticks, week_ticks
