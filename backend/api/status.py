from typing import get_args

from fastapi import APIRouter

from config import get_settings
from models.geojson import ValidationIssue
from services.conversion.coordinates import COORDINATE_FIELD_PAIRS, LAT_RANGE, LNG_RANGE

router = APIRouter(prefix="/status", tags=["status"])


@router.get("")
def status():
    s = get_settings()
    return {
        "status": "ok",
        "name": s.APP_NAME,
        "version": s.APP_VERSION,
        "coordinate_fields": [list(p) for p in COORDINATE_FIELD_PAIRS],
        "ranges": {"lat": list(LAT_RANGE), "lng": list(LNG_RANGE)},
        "issues": list(get_args(ValidationIssue)),
    }
