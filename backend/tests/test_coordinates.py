# backend/tests/test_coordinates.py
import pytest

from services.conversion.coordinates import (
    coerce_float,
    extract_lat_lng,
    validate_coordinate,
)


def test_field_pair_precedence():
    # (lat, long) wins over (lat, lng)
    assert extract_lat_lng({"lat": -6.24, "long": 106.86, "lng": 999}) == (-6.24, 106.86)


@pytest.mark.parametrize(
    "point,expected",
    [
        ({"lat": 1, "lng": 2}, (1, 2)),
        ({"latitude": 1, "longitude": 2}, (1, 2)),
        ({"lat": 1, "lon": 2}, (1, 2)),
        ({"lat": None, "lon": 2}, (None, 2)),  # present but null still matches
    ],
)
def test_field_pairs(point, expected):
    assert extract_lat_lng(point) == expected


@pytest.mark.parametrize("point", [{"lat": 1}, {"x": 1, "y": 2}, {"latitude": 1, "lng": 2}, [1, 2], None, 5])
def test_no_matching_pair(point):
    assert extract_lat_lng(point) is None


@pytest.mark.parametrize(
    "value,expected",
    [(1, 1.0), (-6.5, -6.5), (" 12.5 ", 12.5), ("1e2", 100.0)],
)
def test_coerce_float_ok(value, expected):
    assert coerce_float(value) == expected


@pytest.mark.parametrize("value", ["abc", "", None, True, [1], "nan", "inf", float("inf"), float("nan")])
def test_coerce_float_rejects(value):
    assert coerce_float(value) is None


@pytest.mark.parametrize("lat", [90, -90, 0, "45.5"])
def test_latitude_boundaries_valid(lat):
    assert validate_coordinate(lat, 10).is_valid


@pytest.mark.parametrize("lat", [90.0001, -90.0001])
def test_latitude_boundaries_invalid(lat):
    check = validate_coordinate(lat, 10)
    assert check.issue == "invalid_latitude"
    assert check.pair == [10.0, lat]  # out of range passes through
    assert "must be between -90 and 90" in check.message


@pytest.mark.parametrize("lng", [180, -180])
def test_longitude_boundaries_valid(lng):
    assert validate_coordinate(0, lng).is_valid


@pytest.mark.parametrize("lng", [180.0001, -180.0001])
def test_longitude_boundaries_invalid(lng):
    assert validate_coordinate(0, lng).issue == "invalid_longitude"


def test_non_numeric_latitude_is_zeroed():
    check = validate_coordinate("abc", 106.8)
    assert check.issue == "invalid_latitude"
    assert check.pair == [106.8, 0.0]
    assert check.message == 'Invalid latitude: "abc" is not a valid number'


def test_both_invalid_precedence():
    assert validate_coordinate("x", "y").issue == "both_invalid"
    assert validate_coordinate(100, 200).issue == "both_invalid"
    assert validate_coordinate(100, 200).pair == [200.0, 100.0]
    # coercion failure on one side is reported before a range failure on the other
    assert validate_coordinate(100, "y").issue == "invalid_longitude"


def test_range_message_formats_whole_numbers():
    check = validate_coordinate(200, 10)
    assert check.message == "Invalid latitude: 200 (must be between -90 and 90 degrees)"


def test_integers_beyond_float_range_are_invalid():
    assert coerce_float(10**400) is None
    check = validate_coordinate(10**400, 10)
    assert check.issue == "invalid_latitude"
    assert check.pair == [10.0, 0.0]
    assert validate_coordinate(10, -(10**400)).issue == "invalid_longitude"
