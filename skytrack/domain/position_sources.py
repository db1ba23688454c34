"""Position source codes reported in OpenSky state vectors."""

from __future__ import annotations

from enum import Enum


class PositionSource(str, Enum):
    """Sensing technology that produced a state vector's position."""

    ADSB = "ADSB"
    ASTERIX = "ASTERIX"
    MLAT = "MLAT"
    FLARM = "FLARM"
    # Codes outside the table decode to an empty label
    UNKNOWN = ""


POSITION_SOURCE_CODES: dict[int, PositionSource] = {
    0: PositionSource.ADSB,
    1: PositionSource.ASTERIX,
    2: PositionSource.MLAT,
    3: PositionSource.FLARM,
}


def position_source_from_code(code: int) -> PositionSource:
    """Map an OpenSky ``position_source`` code to its category.

    Unknown codes never raise; they resolve to ``PositionSource.UNKNOWN``.
    """

    return POSITION_SOURCE_CODES.get(code, PositionSource.UNKNOWN)


__all__ = ["POSITION_SOURCE_CODES", "PositionSource", "position_source_from_code"]
