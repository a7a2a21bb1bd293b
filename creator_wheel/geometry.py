"""
Radius layout of the six rings and the polar helpers a renderer needs to place
ticks, labels and arcs. All radii are fractions of a single `size`.
"""
import math
from typing import Dict, Mapping, Optional, Tuple

from .model import (
    CalendarCoordinate, RingGeometry, WheelGeometry, RING_NAMES, YEAR_TICKS,
)

RADIUS_FRACTIONS = {
    "sun": (0.48, 0.44),
    "leaders": (0.43, 0.36),
    "month_days": (0.35, 0.28),
    "weeks": (0.27, 0.22),
    "day_parts": (0.21, 0.17),
    "days": (0.16, 0.11),
}
CENTER_HUB_FRACTION = 0.08
BACKGROUND_FRACTION = 0.49

Point = Tuple[float, float]


def _override_ring(base: RingGeometry, override) -> RingGeometry:
    if not override:
        return base
    outer = override.get("outer_radius", override.get("radius", base.outer_radius))
    inner = override.get("inner_radius", override.get("innerRadius", base.inner_radius))
    outer = float(outer)
    inner = float(inner)
    if inner < 0 or outer <= inner:
        raise ValueError(f"invalid ring radii: outer={outer} inner={inner}")
    return RingGeometry(outer_radius=outer, inner_radius=inner)


def build_geometry(size, overrides: Optional[Mapping[str, Mapping]] = None) -> WheelGeometry:
    """Ring radii for a wheel of `size` pixels.

    `overrides` maps ring names (and "center_hub") to explicit radii, e.g.
    {"sun": {"outer_radius": 390, "inner_radius": 350}}; it is how an editor
    hands its custom radii to the engine.
    """
    try:
        size = float(size)
    except (TypeError, ValueError):
        raise ValueError(f"invalid wheel size: {size!r}")
    if not size > 0 or math.isinf(size):
        raise ValueError(f"wheel size must be positive, got {size}")
    overrides = overrides or {}
    unknown = set(overrides) - set(RING_NAMES) - {"center_hub"}
    if unknown:
        raise ValueError(f"unknown ring override(s): {', '.join(sorted(unknown))}")

    rings = {}
    for name in RING_NAMES:
        outer_fraction, inner_fraction = RADIUS_FRACTIONS[name]
        base = RingGeometry(outer_radius=size * outer_fraction, inner_radius=size * inner_fraction)
        rings[name] = _override_ring(base, overrides.get(name))

    center_hub = size * CENTER_HUB_FRACTION
    hub_override = overrides.get("center_hub")
    if hub_override:
        center_hub = float(hub_override.get("radius", center_hub))

    return WheelGeometry(size=size, center_hub=center_hub, background=size * BACKGROUND_FRACTION, **rings)


def polar_point(center: Point, radius: float, angle_degrees: float) -> Point:
    rad = math.radians(angle_degrees)
    return (center[0] + math.cos(rad) * radius, center[1] + math.sin(rad) * radius)


def tick_line(center: Point, ring: RingGeometry, angle_degrees: float) -> Tuple[Point, Point]:
    """Inner and outer endpoints of a radial tick across the ring."""
    return (
        polar_point(center, ring.inner_radius, angle_degrees),
        polar_point(center, ring.outer_radius, angle_degrees),
    )


def label_point(center: Point, ring: RingGeometry, angle_degrees: float) -> Point:
    return polar_point(center, ring.mid_radius, angle_degrees)


def arc_path(center: Point, ring: RingGeometry, start_degrees: float, end_degrees: float) -> str:
    """SVG path of the annular sector between two angles (clockwise)."""
    sweep = end_degrees - start_degrees
    large_arc = 1 if abs(sweep) % 360 > 180 else 0
    outer_start = polar_point(center, ring.outer_radius, start_degrees)
    outer_end = polar_point(center, ring.outer_radius, end_degrees)
    inner_end = polar_point(center, ring.inner_radius, end_degrees)
    inner_start = polar_point(center, ring.inner_radius, start_degrees)
    r_out = ring.outer_radius
    r_in = ring.inner_radius
    return (
        f"M {outer_start[0]:.3f} {outer_start[1]:.3f} "
        f"A {r_out:.3f} {r_out:.3f} 0 {large_arc} 1 {outer_end[0]:.3f} {outer_end[1]:.3f} "
        f"L {inner_end[0]:.3f} {inner_end[1]:.3f} "
        f"A {r_in:.3f} {r_in:.3f} 0 {large_arc} 0 {inner_start[0]:.3f} {inner_start[1]:.3f} Z"
    )


def segment_angles(count: int, index: int, offset: float = -90.0) -> Tuple[float, float]:
    """Start and end angle of slot `index` when a ring is cut into `count` slots."""
    step = 360 / count
    start = offset + index * step
    return start, start + step


def current_day_marker(geometry: WheelGeometry, coordinate: CalendarCoordinate, progress=None) -> Dict:
    """Position of the red current-day dot on the sun ring's outer rim."""
    if progress is None:
        progress = coordinate.progress_through_day
    angle = (coordinate.day_of_year - 1 + progress) / YEAR_TICKS * 360 - 90
    x, y = polar_point(geometry.center, geometry.sun.outer_radius, angle)
    return {"x": x, "y": y, "angle_degrees": angle, "radius": 8}
