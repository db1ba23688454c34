"""Domain constants for skytrack."""

from .position_sources import POSITION_SOURCE_CODES, PositionSource, position_source_from_code

__all__ = ["POSITION_SOURCE_CODES", "PositionSource", "position_source_from_code"]
