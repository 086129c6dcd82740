from __future__ import annotations
import math
from typing import Any, Iterable

from core.exceptions import MissingFieldError
from services.conversion.shapes import FeatureRef

REQUIRED_FIELDS = ("name", "polygon")


def is_blank(value: Any) -> bool:
    """
    JSON-value falsiness: null, false, "", 0 and NaN.
    Empty lists and objects are NOT blank.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or math.isnan(value)
    return False


def validate_structure(refs: Iterable[FeatureRef]) -> None:
    """Fail on the first feature missing a required field; nothing is converted before this passes."""
    for ref in refs:
        for field in REQUIRED_FIELDS:
            if is_blank(getattr(ref, field)):
                raise MissingFieldError(field=field, path=ref.path)
