# services/conversion/coordinates.py
"""
Coordinate extraction and validation.

Raw points come in several naming conventions; ``COORDINATE_FIELD_PAIRS`` lists
them in priority order and the first pair whose two keys are both present wins.
Values are then coerced to float and range-checked. Validation never raises:
bad components are replaced by 0 (non-numeric) or passed through (out of
range) and the problem is described in a ``CoordinateCheck``.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

# (latitude key, longitude key), tried in this order
COORDINATE_FIELD_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("lat", "long"),
    ("lat", "lng"),
    ("latitude", "longitude"),
    ("lat", "lon"),
)

LAT_RANGE = (-90.0, 90.0)
LNG_RANGE = (-180.0, 180.0)


@dataclass
class CoordinateCheck:
    pair: List[float]  # [lng, lat]
    issue: Optional[str] = None
    message: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.issue is None


def extract_lat_lng(point: Any) -> Optional[Tuple[Any, Any]]:
    """Return the raw (lat, lng) values of the first matching field pair, or None."""
    if not isinstance(point, dict):
        return None
    for lat_key, lng_key in COORDINATE_FIELD_PAIRS:
        if lat_key in point and lng_key in point:
            return point[lat_key], point[lng_key]
    return None


def coerce_float(value: Any) -> Optional[float]:
    """Finite float or None. Booleans are not numbers."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            num = float(value)
        except OverflowError:
            # ints beyond the float range
            return None
    elif isinstance(value, str):
        try:
            num = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return num if math.isfinite(num) else None


def _fmt(num: float) -> str:
    return str(int(num)) if num.is_integer() else repr(num)


def _raw(value: Any) -> str:
    return "null" if value is None else str(value)


def validate_coordinate(lat: Any, lng: Any) -> CoordinateCheck:
    lat_num = coerce_float(lat)
    lng_num = coerce_float(lng)
    pair = [lng_num if lng_num is not None else 0.0, lat_num if lat_num is not None else 0.0]

    if lat_num is None and lng_num is None:
        return CoordinateCheck(
            pair,
            "both_invalid",
            f'Invalid coordinates: latitude "{_raw(lat)}" and longitude "{_raw(lng)}" are not valid numbers',
        )
    if lat_num is None:
        return CoordinateCheck(
            pair, "invalid_latitude", f'Invalid latitude: "{_raw(lat)}" is not a valid number'
        )
    if lng_num is None:
        return CoordinateCheck(
            pair, "invalid_longitude", f'Invalid longitude: "{_raw(lng)}" is not a valid number'
        )

    lat_ok = LAT_RANGE[0] <= lat_num <= LAT_RANGE[1]
    lng_ok = LNG_RANGE[0] <= lng_num <= LNG_RANGE[1]
    if not lat_ok and not lng_ok:
        return CoordinateCheck(
            pair,
            "both_invalid",
            f"Invalid coordinates: latitude {_fmt(lat_num)} (must be -90 to 90), "
            f"longitude {_fmt(lng_num)} (must be -180 to 180)",
        )
    if not lat_ok:
        return CoordinateCheck(
            pair,
            "invalid_latitude",
            f"Invalid latitude: {_fmt(lat_num)} (must be between -90 and 90 degrees)",
        )
    if not lng_ok:
        return CoordinateCheck(
            pair,
            "invalid_longitude",
            f"Invalid longitude: {_fmt(lng_num)} (must be between -180 and 180 degrees)",
        )
    return CoordinateCheck(pair)
