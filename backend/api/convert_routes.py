# api/convert_routes.py
from __future__ import annotations

from fastapi import APIRouter, Response

from api._resp import download_headers
from config import get_settings
from models.convert import ConvertRequest, ConvertResponse, ConvertTextRequest
from models.geojson import FeatureCollection
from services.conversion.assembler import convert, convert_to_geojson
from services.conversion.text_input import parse_json_text

router = APIRouter(prefix="/api/convert", tags=["convert"])


def _respond(data, req, response: Response) -> ConvertResponse:
    result = convert(data, include_markers=req.include_markers, markers=req.markers)
    response.headers.update(download_headers(get_settings().DOWNLOAD_FILENAME))
    return ConvertResponse(geojson=result.geojson, warnings=result.warnings or None)


# Plain `def` handlers: the conversion is CPU-only, FastAPI runs them in its threadpool.
@router.post("", response_model=ConvertResponse, response_model_exclude_none=True)
def convert_data(req: ConvertRequest, response: Response):
    return _respond(req.data, req, response)


@router.post("/simple", response_model=FeatureCollection)
def convert_data_simple(req: ConvertRequest, response: Response):
    response.headers.update(download_headers(get_settings().DOWNLOAD_FILENAME))
    return convert_to_geojson(
        req.data, include_markers=req.include_markers, markers=req.markers
    )


@router.post("/text", response_model=ConvertResponse, response_model_exclude_none=True)
def convert_text(req: ConvertTextRequest, response: Response):
    return _respond(parse_json_text(req.text), req, response)
