"""
Live driver for the wheel.

Two intervals feed the engine: a fast one (about a second) that only moves the
day progress and the rotations, and a slow one (about a minute) that re-reads
the whole coordinate from the clock. Everything is recomputed from the wall
clock on each tick, so missed ticks (a suspended tab, a busy loop) correct
themselves on the next one.
"""
import asyncio
import itertools
import traceback
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Callable, Dict, Optional

import pytz

from . import config
from .daynight import segment_for_part
from .debug import debug_any, debug_coordinate
from .frame import WheelFrame, build_frame
from .geometry import build_geometry
from .model import CalendarCoordinate, WheelOverride, coordinate_from_fields, normalize_minute, normalize_part
from .rotation import compute_rotations

_FAILED = object()


class AsyncioTimers:
    """Repeating timers on an asyncio event loop (single thread, no blocking)."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop
        self._handles: Dict[int, asyncio.TimerHandle] = {}
        self._ids = itertools.count(1)

    @property
    def active_count(self) -> int:
        return len(self._handles)

    def set_interval(self, seconds: float, callback: Callable[[], object]) -> int:
        loop = self._loop or asyncio.get_running_loop()
        handle_id = next(self._ids)

        def fire():
            if handle_id not in self._handles:
                return
            self._handles[handle_id] = loop.call_later(seconds, fire)
            callback()

        self._handles[handle_id] = loop.call_later(seconds, fire)
        return handle_id

    def clear_interval(self, handle_id: int) -> None:
        timer = self._handles.pop(handle_id, None)
        if timer is not None:
            timer.cancel()


class ManualTimers:
    """Deterministic timers driven by `advance()`; also a clock (`now`)."""

    def __init__(self, start: float = 0.0):
        self.now = float(start)
        self._intervals: Dict[int, list] = {}
        self._ids = itertools.count(1)

    @property
    def active_count(self) -> int:
        return len(self._intervals)

    def set_interval(self, seconds: float, callback: Callable[[], object]) -> int:
        if seconds <= 0:
            raise ValueError(f"interval must be positive, got {seconds}")
        handle_id = next(self._ids)
        self._intervals[handle_id] = [self.now + seconds, float(seconds), callback]
        return handle_id

    def clear_interval(self, handle_id: int) -> None:
        self._intervals.pop(handle_id, None)

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            due = [(entry[0], handle_id) for handle_id, entry in self._intervals.items() if entry[0] <= target]
            if not due:
                break
            when, handle_id = min(due)
            entry = self._intervals[handle_id]
            self.now = when
            entry[0] = when + entry[1]
            entry[2]()
        self.now = target


class LiveCoordinateScheduler:
    """Owns the current coordinate and republishes a WheelFrame on every tick.

    Each instance keeps its own coordinate, frame and timer handles; two wheels
    on screen are two schedulers.
    """

    def __init__(
        self,
        source=None,
        timers=None,
        clock: Optional[Callable[[], datetime]] = None,
        size=None,
        override=None,
        fast_interval: float = None,
        slow_interval: float = None,
        on_frame: Optional[Callable[[WheelFrame], object]] = None,
        radius_overrides=None,
        daynight_model: Optional[str] = None,
        starting_weekday: Optional[int] = None,
    ):
        if source is None and override is None:
            from .coordinate_source import CalendarCoordinateSource
            source = CalendarCoordinateSource()
        self.source = source
        self.timers = timers if timers is not None else AsyncioTimers()
        self.clock = clock or (lambda: datetime.now(pytz.UTC))
        self.geometry = build_geometry(config.DEFAULT_SIZE if size is None else size, radius_overrides)
        self.override = override
        self.fast_interval = config.FAST_TICK_SECONDS if fast_interval is None else float(fast_interval)
        self.slow_interval = config.SLOW_TICK_SECONDS if slow_interval is None else float(slow_interval)
        if self.fast_interval <= 0 or self.slow_interval <= 0:
            raise ValueError("tick intervals must be positive")
        self.on_frame = on_frame
        self.daynight_model = daynight_model
        self.starting_weekday = starting_weekday

        self.regenerations = 0
        self._coordinate: Optional[CalendarCoordinate] = None
        self._frame: Optional[WheelFrame] = None
        self._fast_handle = None
        self._slow_handle = None

    # --- lifecycle -----------------------------------------------------------

    @property
    def running(self) -> bool:
        return self._fast_handle is not None or self._slow_handle is not None

    def start(self) -> "LiveCoordinateScheduler":
        if self.override is not None:
            # fixed coordinate: nothing to poll
            self._apply(self._override_coordinate())
            return self
        if self.running:
            return self
        try:
            self._fast_handle = self.timers.set_interval(self.fast_interval, self.fast_tick)
            self._slow_handle = self.timers.set_interval(self.slow_interval, self.slow_tick)
            self.slow_tick()
        except Exception:
            self.stop()
            raise
        return self

    def stop(self) -> None:
        fast, slow = self._fast_handle, self._slow_handle
        self._fast_handle = None
        self._slow_handle = None
        try:
            if fast is not None:
                self.timers.clear_interval(fast)
        finally:
            if slow is not None:
                self.timers.clear_interval(slow)

    def restart(self) -> "LiveCoordinateScheduler":
        self.stop()
        return self.start()

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False

    # --- state ---------------------------------------------------------------

    @property
    def coordinate(self) -> Optional[CalendarCoordinate]:
        return self._coordinate

    @property
    def frame(self) -> WheelFrame:
        if self._frame is None:
            self.refresh()
        return self._frame

    def refresh(self) -> WheelFrame:
        if self.override is not None:
            return self._apply(self._override_coordinate())
        return self.slow_tick()

    # --- ticks ---------------------------------------------------------------

    def fast_tick(self) -> WheelFrame:
        if self.override is not None or self._coordinate is None:
            return self.refresh()
        day_time = self._read(self.source.date_to_day_time, self.clock())
        if day_time is _FAILED:
            return self._frame
        part = normalize_part((day_time or {}).get("part"))
        minute = normalize_minute((day_time or {}).get("minute"))
        if part < self._coordinate.part_of_day:
            # the 18 parts wrapped: a new day began at sunrise
            return self.slow_tick()
        coordinate = replace(self._coordinate, part_of_day=part, minute=minute)
        return self._apply(coordinate)

    def slow_tick(self) -> WheelFrame:
        if self.override is not None:
            return self.refresh()
        now = self.clock()
        calendar = self._read(self.source.date_to_calendar, now)
        day_time = self._read(self.source.date_to_day_time, now)
        if calendar is _FAILED or day_time is _FAILED:
            if self._frame is not None:
                return self._frame
            calendar = day_time = None
        return self._apply(coordinate_from_fields(calendar, day_time))

    # --- internals -----------------------------------------------------------

    def _override_coordinate(self) -> CalendarCoordinate:
        if isinstance(self.override, CalendarCoordinate):
            return self.override
        if isinstance(self.override, WheelOverride):
            return self.override.to_coordinate()
        return WheelOverride(**self.override).to_coordinate()

    def _read(self, fn, instant):
        try:
            return fn(instant)
        except Exception:
            traceback.print_exc()
            debug_any(instant, "Fallo leyendo la fuente de calendario")
            return _FAILED

    def _apply(self, coordinate: CalendarCoordinate) -> WheelFrame:
        previous = self._coordinate
        if self._frame is None or previous is None or coordinate.coarse_key != previous.coarse_key:
            frame = build_frame(coordinate, self.geometry, daynight_model=self.daynight_model,
                                starting_weekday=self.starting_weekday)
            self.regenerations += 1
            debug_coordinate(coordinate, "Regenerando rueda")
        else:
            frame = replace(
                self._frame,
                coordinate=coordinate,
                rotations=compute_rotations(coordinate),
                segment=segment_for_part(coordinate.part_of_day),
            )
        self._coordinate = coordinate
        self._frame = frame
        if self.on_frame is not None:
            self.on_frame(frame)
        return frame


def manual_clock(timers: ManualTimers, epoch: datetime) -> Callable[[], datetime]:
    """Clock that follows a ManualTimers' virtual time from `epoch`."""
    return lambda: epoch + timedelta(seconds=timers.now)
