"""Decode positional OpenSky state vectors into ``State`` models.

OpenSky encodes each state vector as a 17 element JSON array whose slots are
identified by position only. The ``STATE_SLOTS`` table below is the single
description of that layout: for every slot it lists the wire kind, whether
``null`` is allowed, the ``State`` field it fills and the conversion applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Sequence

from skytrack.domain.position_sources import PositionSource, position_source_from_code
from skytrack.exceptions import StateDecodeError
from skytrack.models.air_traffic import State

STATE_VECTOR_LENGTH = 17

STRING = "string"
NUMBER = "number"
BOOLEAN = "boolean"
NUMBER_LIST = "number list"


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a number on the wire
    return isinstance(value, (int, float)) and not isinstance(value, bool)


_KIND_CHECKS: dict[str, Callable[[Any], bool]] = {
    STRING: lambda value: isinstance(value, str),
    NUMBER: _is_number,
    BOOLEAN: lambda value: isinstance(value, bool),
    NUMBER_LIST: lambda value: isinstance(value, (list, tuple))
    and all(_is_number(item) for item in value),
}


def epoch_to_datetime(value: int | float) -> datetime:
    """Truncate wire epoch seconds to an integer and return an aware UTC datetime."""

    return datetime.fromtimestamp(int(value), tz=timezone.utc)


def _to_sensors(value: Sequence[int | float]) -> tuple[int, ...]:
    return tuple(int(item) for item in value)


def _to_position_source(value: int | float) -> PositionSource:
    return position_source_from_code(int(value))


def _identity(value: Any) -> Any:
    return value


@dataclass(frozen=True)
class StateSlot:
    """Wire contract of one state vector slot."""

    index: int
    field: str
    kind: str
    nullable: bool
    convert: Callable[[Any], Any] = _identity


STATE_SLOTS: tuple[StateSlot, ...] = (
    StateSlot(0, "icao24", STRING, nullable=False),
    StateSlot(1, "callsign", STRING, nullable=True),
    StateSlot(2, "origin_country", STRING, nullable=False),
    StateSlot(3, "time_position", NUMBER, nullable=True, convert=epoch_to_datetime),
    StateSlot(4, "last_contact", NUMBER, nullable=False, convert=epoch_to_datetime),
    StateSlot(5, "longitude", NUMBER, nullable=True, convert=float),
    StateSlot(6, "latitude", NUMBER, nullable=True, convert=float),
    StateSlot(7, "baro_altitude", NUMBER, nullable=True, convert=float),
    StateSlot(8, "on_ground", BOOLEAN, nullable=False),
    StateSlot(9, "velocity", NUMBER, nullable=True, convert=float),
    StateSlot(10, "heading", NUMBER, nullable=True, convert=float),
    StateSlot(11, "vertical_rate", NUMBER, nullable=True, convert=float),
    StateSlot(12, "sensors", NUMBER_LIST, nullable=True, convert=_to_sensors),
    StateSlot(13, "geo_altitude", NUMBER, nullable=True, convert=float),
    StateSlot(14, "squawk", STRING, nullable=True),
    StateSlot(15, "spi", BOOLEAN, nullable=False),
    StateSlot(16, "position_source", NUMBER, nullable=False, convert=_to_position_source),
)


def _decode_slot(slot: StateSlot, value: Any, index: int) -> Any:
    if value is None:
        if slot.nullable:
            return None
        raise StateDecodeError(
            f"missing {slot.field} value at position {index}",
            index=index,
            slot=slot.index,
            field=slot.field,
            value=value,
        )

    if not _KIND_CHECKS[slot.kind](value):
        raise StateDecodeError(
            f"invalid {slot.field} value at position {index}: "
            f"expected {slot.kind}, got {value!r}",
            index=index,
            slot=slot.index,
            field=slot.field,
            value=value,
        )

    try:
        return slot.convert(value)
    except (OverflowError, OSError, ValueError) as exc:
        raise StateDecodeError(
            f"invalid {slot.field} value at position {index}: {exc}",
            index=index,
            slot=slot.index,
            field=slot.field,
            value=value,
        ) from exc


def decode_state(raw: Any, index: int) -> State:
    """Decode one raw state vector.

    ``index`` is the position of ``raw`` within its batch and is only used to
    describe failures. Raises ``StateDecodeError`` for records of the wrong
    shape or with a slot that does not match the wire contract.
    """

    if not isinstance(raw, (list, tuple)):
        raise StateDecodeError(
            f"invalid state object at position {index}: expected an array, "
            f"got {type(raw).__name__}",
            index=index,
            value=raw,
        )
    if len(raw) != STATE_VECTOR_LENGTH:
        raise StateDecodeError(
            f"invalid state object at position {index}: response contains "
            f"{len(raw)} values, expected {STATE_VECTOR_LENGTH}",
            index=index,
            value=raw,
        )

    values = {slot.field: _decode_slot(slot, raw[slot.index], index) for slot in STATE_SLOTS}
    return State(**values)


__all__ = [
    "STATE_SLOTS",
    "STATE_VECTOR_LENGTH",
    "StateSlot",
    "decode_state",
    "epoch_to_datetime",
]
