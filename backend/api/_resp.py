# api/_resp.py
from fastapi.responses import JSONResponse


def fail(status: int, message: str) -> JSONResponse:
    """Error payload shared by every route: {"error": message}."""
    return JSONResponse(status_code=status, content={"error": message})


def download_headers(filename: str) -> dict:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}
