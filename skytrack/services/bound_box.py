"""Geometric checks applied to a monitoring area before it is queried."""

from __future__ import annotations

from skytrack.exceptions import BoundBoxValidationError
from skytrack.models.air_traffic import BoundBox

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0


def _in_range(value: float, lower: float, upper: float) -> bool:
    return lower <= value <= upper


def validate_bound_box(box: BoundBox) -> BoundBox:
    """Return ``box`` if it can be queried, else raise ``BoundBoxValidationError``.

    Rules are checked in a fixed order and the first violation is reported:
    longitude order (strict), latitude order, longitude range, latitude range.
    Comparisons are written so that NaN coordinates fail.
    """

    longitudes = {"min_longitude": box.min_longitude, "max_longitude": box.max_longitude}
    latitudes = {"min_latitude": box.min_latitude, "max_latitude": box.max_latitude}

    if not box.min_longitude < box.max_longitude:
        raise BoundBoxValidationError(
            "longitude_order",
            "min_longitude must be lower than max_longitude. "
            f"min_longitude: {box.min_longitude}, max_longitude: {box.max_longitude}",
            longitudes,
        )
    if not box.min_latitude <= box.max_latitude:
        raise BoundBoxValidationError(
            "latitude_order",
            "min_latitude is greater than max_latitude. "
            f"min_latitude: {box.min_latitude}, max_latitude: {box.max_latitude}",
            latitudes,
        )
    if not all(_in_range(v, MIN_LONGITUDE, MAX_LONGITUDE) for v in longitudes.values()):
        raise BoundBoxValidationError(
            "longitude_range",
            "Longitude is out of range [-180, 180]. "
            f"min_longitude: {box.min_longitude}, max_longitude: {box.max_longitude}",
            longitudes,
        )
    if not all(_in_range(v, MIN_LATITUDE, MAX_LATITUDE) for v in latitudes.values()):
        raise BoundBoxValidationError(
            "latitude_range",
            "Latitude is out of range [-90, 90]. "
            f"min_latitude: {box.min_latitude}, max_latitude: {box.max_latitude}",
            latitudes,
        )
    return box


__all__ = ["validate_bound_box"]
