# backend/tests/test_polygons.py
import json

from services.conversion.polygons import resolve_polygon
from services.conversion.shapes import FeatureRef


def _ref(polygon, name="F", index=0):
    return FeatureRef(path=f"index {index}", index=index, raw={"name": name, "polygon": polygon})


def test_resolves_structured_list(square_points):
    res = resolve_polygon(_ref(square_points))
    assert res.ok
    assert res.coordinates == [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]]
    assert res.warnings == []


def test_resolves_json_string(square_points):
    res = resolve_polygon(_ref(json.dumps(square_points)))
    assert res.ok and len(res.coordinates) == 4


def test_invalid_json_becomes_warning():
    res = resolve_polygon(_ref("not json", name="X", index=2))
    assert not res.ok
    (w,) = res.warnings
    assert w.issue == "invalid_json"
    assert w.feature_name == "X"
    assert w.feature_index == 2
    assert w.coordinate_index == -1
    assert w.coordinate == [0.0, 0.0]
    assert w.message.startswith("Invalid JSON format in polygon:")


def test_empty_polygon_is_skipped_silently():
    for payload in ([], "[]"):
        res = resolve_polygon(_ref(payload))
        assert not res.ok
        assert res.warnings == []


def test_non_sequence_payload_is_flagged():
    for payload in ({"lat": 1, "lng": 2}, 42, '{"lat": 1}'):
        res = resolve_polygon(_ref(payload))
        assert not res.ok
        assert [w.issue for w in res.warnings] == ["invalid_polygon"]


def test_unknown_point_format_drops_feature_but_keeps_earlier_warnings():
    points = [{"lat": 200, "lng": 0}, {"lat": 1, "lng": 1}, {"x": 1, "y": 2}]
    res = resolve_polygon(_ref(points))
    assert not res.ok
    assert [w.issue for w in res.warnings] == ["invalid_latitude", "invalid_coordinate_format"]
    assert res.warnings[1].coordinate_index == 2


def test_bad_values_are_substituted_not_dropped():
    res = resolve_polygon(_ref([{"lat": "abc", "lng": 106.8}, {"lat": 1, "lng": 1}]))
    assert res.ok
    assert res.coordinates[0] == [106.8, 0.0]
    (w,) = res.warnings
    assert w.issue == "invalid_latitude"
    assert w.coordinate_index == 0
    assert w.coordinate == [106.8, 0.0]


def test_nan_and_infinity_literals_are_invalid_json():
    for text in ('[{"lat": NaN, "lng": 1}]', '[{"lat": 1, "lng": -Infinity}]'):
        res = resolve_polygon(_ref(text, name="N"))
        assert not res.ok
        assert [w.issue for w in res.warnings] == ["invalid_json"]
