"""Models for aircraft state vectors retrieved from OpenSky."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from skytrack.domain.position_sources import PositionSource


class BoundBox(BaseModel):
    """Rectangular monitoring area in WGS-84 degrees.

    Construction accepts any coordinates; ``validate_bound_box`` decides
    whether the box may be queried.
    """

    min_latitude: float = Field(..., description="Southern edge in degrees")
    max_latitude: float = Field(..., description="Northern edge in degrees")
    min_longitude: float = Field(..., description="Western edge in degrees")
    max_longitude: float = Field(..., description="Eastern edge in degrees")

    model_config = ConfigDict(frozen=True)

    def to_query_params(self) -> dict[str, str]:
        """Return the ``/states/all`` area parameters."""

        return {
            "lamin": f"{self.min_latitude:.4f}",
            "lomin": f"{self.min_longitude:.4f}",
            "lamax": f"{self.max_latitude:.4f}",
            "lomax": f"{self.max_longitude:.4f}",
        }


class State(BaseModel):
    """Decoded state vector of a single aircraft.

    Every field OpenSky may leave empty is ``None`` when not received.
    """

    icao24: str = Field(..., description="ICAO24 transponder address as hex string")
    callsign: Optional[str] = Field(
        default=None, description="Callsign, None if none has been received"
    )
    origin_country: str = Field(..., description="Country inferred from the ICAO24 address")
    time_position: Optional[datetime] = Field(
        default=None, description="Time of the last position report (UTC)"
    )
    last_contact: datetime = Field(
        ..., description="Time of the last message from the transponder (UTC)"
    )
    longitude: Optional[float] = Field(default=None, description="WGS-84 longitude in degrees")
    latitude: Optional[float] = Field(default=None, description="WGS-84 latitude in degrees")
    baro_altitude: Optional[float] = Field(
        default=None, description="Barometric altitude in meters"
    )
    on_ground: bool = Field(..., description="True if the aircraft reports surface positions")
    velocity: Optional[float] = Field(default=None, description="Ground speed in m/s")
    heading: Optional[float] = Field(
        default=None, description="True track in decimal degrees, 0 is north"
    )
    vertical_rate: Optional[float] = Field(
        default=None, description="Vertical rate in m/s, positive when climbing"
    )
    sensors: Optional[tuple[int, ...]] = Field(
        default=None, description="Serials of the sensors that received this vehicle"
    )
    geo_altitude: Optional[float] = Field(
        default=None, description="Geometric altitude in meters"
    )
    squawk: Optional[str] = Field(default=None, description="Transponder code")
    spi: bool = Field(..., description="Special purpose indicator")
    position_source: PositionSource = Field(
        default=PositionSource.UNKNOWN, description="Origin of the position"
    )

    model_config = ConfigDict(frozen=True)


class StateResponse(BaseModel):
    """Decoded snapshot of the airspace for one poll."""

    time: Optional[datetime] = Field(
        default=None,
        description="Time the state vectors are associated with (UTC), None if malformed",
    )
    states: tuple[State, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)


__all__ = ["BoundBox", "State", "StateResponse"]
