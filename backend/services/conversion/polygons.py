# services/conversion/polygons.py
from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from models.geojson import CoordinateWarning
from services.conversion.coordinates import extract_lat_lng, validate_coordinate
from services.conversion.shapes import FeatureRef
from services.conversion.text_input import strict_loads

logger = logging.getLogger(__name__)


@dataclass
class PolygonResolution:
    """Outcome of resolving one feature: coordinates to emit, or None when the feature is dropped."""

    coordinates: Optional[List[List[float]]] = None
    warnings: List[CoordinateWarning] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.coordinates is not None


def _feature_warning(ref: FeatureRef, issue: str, message: str, coordinate_index: int = -1):
    return CoordinateWarning(
        feature_index=ref.index,
        feature_name=ref.name,
        coordinate_index=coordinate_index,
        coordinate=[0.0, 0.0],
        issue=issue,
        message=message,
    )


def load_points(ref: FeatureRef) -> PolygonResolution | List[Any]:
    """
    Turn the feature's polygon payload into a list of raw points.
    Returns a failed PolygonResolution when the payload is unusable.
    """
    payload = ref.polygon
    if isinstance(payload, str):
        try:
            payload = strict_loads(payload)
        except ValueError as e:  # JSONDecodeError, NaN/Infinity literals
            return PolygonResolution(
                warnings=[
                    _feature_warning(
                        ref, "invalid_json", f"Invalid JSON format in polygon: {e}"
                    )
                ]
            )
    if not isinstance(payload, list):
        logger.warning("Invalid polygon format for %r: %r", ref.name, payload)
        return PolygonResolution(
            warnings=[
                _feature_warning(
                    ref,
                    "invalid_polygon",
                    f"Invalid polygon format: expected an array of points, got {type(payload).__name__}",
                )
            ]
        )
    return payload


def resolve_polygon(ref: FeatureRef) -> PolygonResolution:
    points = load_points(ref)
    if isinstance(points, PolygonResolution):
        return points
    if not points:
        return PolygonResolution()

    coords: List[List[float]] = []
    warnings: List[CoordinateWarning] = []
    for i, point in enumerate(points):
        raw = extract_lat_lng(point)
        if raw is None:
            # one unreadable point drops the whole feature
            logger.warning(
                "Dropping feature %r: invalid coordinate format at point %d: %r",
                ref.name,
                i,
                point,
            )
            warnings.append(
                _feature_warning(
                    ref,
                    "invalid_coordinate_format",
                    f"Invalid coordinate format: {json.dumps(point, default=str)}",
                    coordinate_index=i,
                )
            )
            return PolygonResolution(warnings=warnings)

        check = validate_coordinate(*raw)
        if not check.is_valid:
            warnings.append(
                CoordinateWarning(
                    feature_index=ref.index,
                    feature_name=ref.name,
                    coordinate_index=i,
                    coordinate=list(check.pair),
                    issue=check.issue,
                    message=check.message,
                )
            )
        coords.append(check.pair)
    return PolygonResolution(coordinates=coords, warnings=warnings)
