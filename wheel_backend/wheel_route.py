import traceback
from datetime import datetime

import pytz
from flask import jsonify, request

from creator_wheel import config
from creator_wheel.coordinate_source import CalendarCoordinateSource
from creator_wheel.daynight import format_part_time
from creator_wheel.debug import debug_any, debug_coordinate
from creator_wheel.frame import build_frame
from creator_wheel.geometry import build_geometry
from creator_wheel.model import WheelOverride, coordinate_from_fields

OVERRIDE_FIELDS = ("day_of_year", "day_of_week", "part", "minute", "day_of_month", "month")

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _request_params() -> dict:
    """Query string merged with the JSON body (body wins)."""
    data = request.args.to_dict()
    body = request.get_json(silent=True)
    if isinstance(body, dict):
        data.update(body)
    return data


def _float_param(data: dict, name: str, default=None):
    value = data.get(name)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"invalid {name}: {value!r}")


def _int_param(data: dict, name: str):
    value = data.get(name)
    if value is None or value == "":
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"invalid {name}: {value!r}")


def _bool_param(data: dict, name: str, default: bool) -> bool:
    value = data.get(name)
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid {name}: {value!r}")


def _parse_instant(date_str, tz) -> datetime:
    """ISO datetime → aware datetime; naive strings are local to `tz`."""
    if date_str is None or date_str == "":
        return datetime.now(pytz.UTC)
    if not isinstance(date_str, str):
        raise ValueError(f"invalid datetime: {date_str!r}")
    text = date_str.strip()
    if text.endswith("Z") or text.endswith("z"):
        text = text[:-1] + "+00:00"
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = tz.localize(dt)
    return dt


def _source_from(data: dict) -> CalendarCoordinateSource:
    return CalendarCoordinateSource(
        latitude=_float_param(data, "latitude"),
        longitude=_float_param(data, "longitude"),
        timezone=data.get("timezone") or None,
    )


def wheel():
    try:
        data = _request_params()
        try:
            geometry = build_geometry(_float_param(data, "size", config.DEFAULT_SIZE))
            include_ticks = _bool_param(data, "include_ticks", True)
            overrides = {name: _int_param(data, name) for name in OVERRIDE_FIELDS}
            if any(value is not None for value in overrides.values()):
                override = WheelOverride(**overrides)
                coordinate = override.to_coordinate()
                mode = "override"
                instant = None
            else:
                source = _source_from(data)
                instant = _parse_instant(data.get("datetime"), source.tz)
                coordinate = source.coordinate(instant)
                mode = "live"
        except ValueError as e:
            debug_any(e, "Parámetros inválidos en /wheel")
            return jsonify({"error": str(e)}), 400

        debug_coordinate(coordinate, "/wheel")
        frame = build_frame(coordinate, geometry)
        payload = frame.to_dict(include_ticks=include_ticks)
        payload["mode"] = mode
        payload["hub_text"] = format_part_time(coordinate.part_of_day, coordinate.minute)
        if instant is not None:
            payload["datetime"] = instant.astimezone(pytz.UTC).isoformat()
        return jsonify(payload)
    except Exception as e:
        traceback.print_exc()
        return jsonify({"error": str(e)}), 500


def calendar_now():
    try:
        data = _request_params()
        try:
            source = _source_from(data)
        except ValueError as e:
            return jsonify({"error": str(e)}), 400
        now = datetime.now(pytz.UTC)
        calendar = source.date_to_calendar(now)
        day_time = source.date_to_day_time(now)
        coordinate = coordinate_from_fields(calendar, day_time)
        return jsonify({
            "utc": now.isoformat(),
            "timezone": source.tz.zone,
            "calendar": calendar,
            "day_time": day_time,
            "coordinate": coordinate.to_dict(),
            "hub_text": format_part_time(coordinate.part_of_day, coordinate.minute),
        })
    except Exception as e:
        traceback.print_exc()
        return jsonify({"error": str(e)}), 500


def register_wheel_routes(app):
    app.add_url_rule('/wheel', view_func=wheel, methods=['GET', 'POST'])
    app.add_url_rule('/calendar/now', view_func=calendar_now, methods=['GET'])
