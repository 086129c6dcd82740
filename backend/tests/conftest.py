# backend/tests/conftest.py
import os
import sys
import pytest
from fastapi.testclient import TestClient

# Make /Project/backend importable as top-level
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

# Keep test output quiet and independent of a local backend/.env
os.environ.setdefault("LOG_LEVEL", "WARNING")

# Import app only after setting env
from main import app


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def square_points():
    return [
        {"lat": 0, "long": 0},
        {"lat": 0, "long": 1},
        {"lat": 1, "long": 1},
        {"lat": 1, "long": 0},
    ]
