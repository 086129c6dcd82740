# services/conversion/assembler.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

from models.convert import Marker
from models.geojson import (
    CoordinateWarning,
    FeatureCollection,
    GeoJSONFeature,
    PointGeometry,
    PolygonGeometry,
)
from services.conversion.coordinates import validate_coordinate
from services.conversion.polygons import resolve_polygon
from services.conversion.rings import close_ring
from services.conversion.shapes import detect_shape, flatten_features
from services.conversion.structure import is_blank, validate_structure

logger = logging.getLogger(__name__)

DEFAULT_MARKER_NAME = "Custom Marker"


@dataclass
class ConversionResult:
    geojson: FeatureCollection
    warnings: List[CoordinateWarning] = field(default_factory=list)


def polygon_feature(name: Any, ring: List[List[float]]) -> GeoJSONFeature:
    return GeoJSONFeature(
        properties={"name": name},
        geometry=PolygonGeometry(coordinates=[ring]),
    )


def marker_features(markers: Iterable[Marker | dict]):
    """Point features for custom markers; invalid markers are still emitted, only flagged."""
    features: List[GeoJSONFeature] = []
    warnings: List[CoordinateWarning] = []
    for m in markers:
        if isinstance(m, dict):
            m = Marker.model_validate(m)
        name = DEFAULT_MARKER_NAME if is_blank(m.name) else str(m.name)
        check = validate_coordinate(m.lat, m.lng)
        if not check.is_valid:
            warnings.append(
                CoordinateWarning(
                    feature_index=-1,
                    feature_name=name,
                    coordinate_index=0,
                    coordinate=list(check.pair),
                    issue=check.issue,
                    message=f"Custom marker: {check.message}",
                )
            )
        features.append(
            GeoJSONFeature(
                properties={"name": name},
                geometry=PointGeometry(coordinates=list(check.pair)),
            )
        )
    return features, warnings


def convert(
    data: Any,
    include_markers: bool = False,
    markers: Optional[Iterable[Marker | dict]] = None,
) -> ConversionResult:
    """
    Run the full pipeline: detect shape, check required fields for every
    feature, then resolve, validate and close each polygon. Structural
    problems raise; everything else ends up in ``warnings``.
    """
    shape = detect_shape(data)
    refs = flatten_features(data, shape)
    validate_structure(refs)

    features: List[GeoJSONFeature] = []
    warnings: List[CoordinateWarning] = []
    for ref in refs:
        resolved = resolve_polygon(ref)
        warnings.extend(resolved.warnings)
        if not resolved.ok:
            continue
        features.append(polygon_feature(ref.name, close_ring(resolved.coordinates)))

    markers = list(markers or [])
    if include_markers and markers:
        point_features, marker_warnings = marker_features(markers)
        features.extend(point_features)
        warnings.extend(marker_warnings)

    logger.info(
        "Converted %d input features (%s) into %d GeoJSON features with %d warnings",
        len(refs),
        shape.value,
        len(features),
        len(warnings),
    )
    return ConversionResult(geojson=FeatureCollection(features=features), warnings=warnings)


def convert_to_geojson(
    data: Any,
    include_markers: bool = False,
    markers: Optional[Iterable[Marker | dict]] = None,
) -> FeatureCollection:
    return convert(data, include_markers=include_markers, markers=markers).geojson
