from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, List

from core.exceptions import InvalidInputError

AREA_LIST_KEY = "area_list"


class InputShape(str, Enum):
    FLAT = "flat"  # [{name, polygon}, ...]
    NESTED = "nested"  # [{area_list: [{name, polygon}, ...]}, ...]


@dataclass
class FeatureRef:
    """One feature-like object, wherever it sat in the input."""

    path: str  # "index 2" or "area[0].area_list[2]"
    index: int  # running position used in warnings
    raw: Any

    @property
    def name(self) -> Any:
        return self.raw.get("name") if isinstance(self.raw, dict) else None

    @property
    def polygon(self) -> Any:
        return self.raw.get("polygon") if isinstance(self.raw, dict) else None


def detect_shape(data: Any) -> InputShape:
    """Nested as soon as any element carries an 'area_list' key, flat otherwise."""
    if not isinstance(data, list):
        raise InvalidInputError(
            "Invalid input: Expected an array of feature data or area data"
        )
    if any(isinstance(item, dict) and AREA_LIST_KEY in item for item in data):
        return InputShape.NESTED
    return InputShape.FLAT


def flatten_features(data: List[Any], shape: InputShape) -> List[FeatureRef]:
    if shape is InputShape.FLAT:
        return [FeatureRef(path=f"index {i}", index=i, raw=f) for i, f in enumerate(data)]

    refs: List[FeatureRef] = []
    running = 0
    for area_idx, area in enumerate(data):
        area_list = area.get(AREA_LIST_KEY) if isinstance(area, dict) else None
        if not isinstance(area_list, list):
            continue
        for feat_idx, feature in enumerate(area_list):
            refs.append(
                FeatureRef(
                    path=f"area[{area_idx}].area_list[{feat_idx}]",
                    index=running,
                    raw=feature,
                )
            )
            running += 1
    return refs
