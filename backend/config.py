# backend/config.py
from __future__ import annotations
from pathlib import Path
import os
from dotenv import load_dotenv

# Load exactly backend/.env (do NOT call load_dotenv() without a path)
ENV_FILE = Path(__file__).with_name(".env")
load_dotenv(ENV_FILE, override=False)


def _split_csv(value: str) -> list[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


def get_settings():
    return Settings


class Settings:
    APP_NAME: str = os.getenv("APP_NAME", "Stations GeoJSON Converter")
    APP_VERSION: str = "1.0.0"
    CORS_ALLOW_ORIGINS: list[str] = _split_csv(
        os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:3000")
    )
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    # suggested name for the downloaded file; informational only
    DOWNLOAD_FILENAME: str = os.getenv("DOWNLOAD_FILENAME", "stations.geojson")


settings = Settings
