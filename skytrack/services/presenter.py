"""Plain text rendering of decoded responses for the console."""

from __future__ import annotations

from typing import Any

from skytrack.models.air_traffic import State, StateResponse

MISSING = "-"

_COLUMNS = (
    ("ICAO24", "icao24"),
    ("CallSign", "callsign"),
    ("OriginCountry", "origin_country"),
    ("TimePosition", "time_position"),
    ("LastContact", "last_contact"),
    ("Longitude", "longitude"),
    ("Latitude", "latitude"),
    ("BarometricAltitude", "baro_altitude"),
    ("OnGround", "on_ground"),
    ("Velocity", "velocity"),
    ("Heading", "heading"),
    ("VerticalRate", "vertical_rate"),
    ("Sensors", "sensors"),
    ("GeoAltitude", "geo_altitude"),
    ("Squawk", "squawk"),
    ("Spi", "spi"),
    ("PositionSource", "position_source"),
)


def _format_value(value: Any) -> str:
    if value is None:
        return MISSING
    if hasattr(value, "isoformat"):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        # An empty sensor list is a received value, unlike None
        return "[" + ",".join(str(item) for item in value) + "]"
    if hasattr(value, "value"):
        return value.value or MISSING
    return str(value)


def render_state(state: State) -> str:
    """Render one state as tab separated ``Label: value`` pairs."""

    return "\t".join(
        f"{label}: {_format_value(getattr(state, name))}" for label, name in _COLUMNS
    )


def render_response(response: StateResponse) -> str:
    lines = [
        f"Got {len(response.states)} records.",
        f"Time: {_format_value(response.time)}",
    ]
    lines.extend(render_state(state) for state in response.states)
    return "\n".join(lines)


__all__ = ["render_response", "render_state"]
