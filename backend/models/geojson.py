# models/geojson.py
from __future__ import annotations
from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ValidationIssue = Literal[
    "invalid_latitude",
    "invalid_longitude",
    "both_invalid",
    "invalid_json",
    "invalid_polygon",
    "invalid_coordinate_format",
]


class PolygonGeometry(BaseModel):
    type: Literal["Polygon"] = "Polygon"
    # [ring][point][lng, lat]; a single outer ring, no holes
    coordinates: List[List[List[float]]]


class PointGeometry(BaseModel):
    type: Literal["Point"] = "Point"
    coordinates: List[float]  # [lng, lat]


class GeoJSONFeature(BaseModel):
    type: Literal["Feature"] = "Feature"
    properties: Dict[str, Any] = Field(default_factory=dict)
    geometry: Union[PolygonGeometry, PointGeometry] = Field(discriminator="type")


class FeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: List[GeoJSONFeature] = Field(default_factory=list)


class CoordinateWarning(BaseModel):
    """
    Non-fatal problem found while converting one feature or marker.

    feature_index is -1 for custom markers; coordinate_index is -1 when the
    whole feature is affected (e.g. undecodable polygon text).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    feature_index: int
    feature_name: Optional[Any] = None
    coordinate_index: int
    coordinate: List[float]  # [lng, lat], 0 for non-numeric sides
    issue: ValidationIssue
    message: str
