# models/convert.py
from __future__ import annotations
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.geojson import CoordinateWarning, FeatureCollection


class Marker(BaseModel):
    # numbers are expected, but anything is accepted and range-checked later
    lat: Any = None
    lng: Any = None
    name: Any = None


class _ConvertOptions(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    include_markers: bool = False
    markers: List[Marker] = Field(default_factory=list)


class ConvertRequest(_ConvertOptions):
    # flat [{name, polygon}] or nested [{area_list: [...]}]; shape checked in the service
    data: Any = None


class ConvertTextRequest(_ConvertOptions):
    text: str


class ConvertResponse(BaseModel):
    geojson: FeatureCollection
    warnings: Optional[List[CoordinateWarning]] = None
