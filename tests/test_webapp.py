import math

import pytest

from cli import build_arg_parser
from webapp import create_app


@pytest.fixture
def client():
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()


def test_post_bbox(client):
    res = client.post("/api/bbox", json={"lat": 89.6349537, "lon": 51.3556355, "radius_km": 85.245})
    assert res.status_code == 200
    data = res.get_json()
    assert data["status"] == "ok"
    (box,) = data["result"]["bboxes"]
    assert box["min"] == {"latitude": 88.86918483605231, "longitude": -180}
    assert box["max"] == {"latitude": 90, "longitude": 180}
    assert data["geojson"]["type"] == "FeatureCollection"
    assert len(data["geojson"]["features"]) == 2


def test_get_bbox_query_string(client):
    res = client.get("/api/bbox?lat=-14.2436432&lon=-178.1795257&radius_km=276.494742")
    assert res.status_code == 200
    data = res.get_json()
    assert data["result"]["wraps"] is True
    assert len(data["result"]["bboxes"]) == 2


def test_missing_center_is_400(client):
    res = client.post("/api/bbox", json={"radius_km": 10})
    assert res.status_code == 400
    assert res.get_json()["status"] == "error"


def test_bad_number_is_400(client):
    res = client.get("/api/bbox?lat=abc&lon=0")
    assert res.status_code == 400
    assert "lat" in res.get_json()["message"]


def test_out_of_range_is_400(client):
    res = client.post("/api/bbox", json={"lat": 0, "lon": 200, "radius_km": 10})
    assert res.status_code == 400


def test_defaults_come_from_base_args():
    base = build_arg_parser().parse_args(["--lat", "0", "--lon", "0", "--radius-km", "0"])
    client = create_app(base).test_client()
    res = client.post("/api/bbox", json={})
    assert res.status_code == 200
    (box,) = res.get_json()["result"]["bboxes"]
    assert box["min"] == box["max"]


def test_api_never_writes_files(tmp_path):
    base = build_arg_parser().parse_args(["--outdir", str(tmp_path / "out"), "--geojson", "--csv"])
    client = create_app(base).test_client()
    res = client.post("/api/bbox", json={"lat": 10, "lon": 10, "radius_km": 5})
    assert res.status_code == 200
    assert res.get_json()["result"]["outputs"] == {}
    assert not (tmp_path / "out").exists()


def test_index_served(client):
    res = client.get("/")
    assert res.status_code == 200
    assert b"/api/bbox" in res.data


def test_nan_coordinates_sent_as_null(monkeypatch, client):
    import cli
    from circle_bbox.geo import BBox, Point

    nan_box = BBox(Point(-1.0, math.nan), Point(1.0, math.nan))
    monkeypatch.setattr(cli, "bboxes_around", lambda radius_km, center: [nan_box])
    res = client.post("/api/bbox", json={"lat": 0, "lon": 0, "radius_km": 1})
    assert res.status_code == 200
    assert b"NaN" not in res.data
    (box,) = res.get_json()["result"]["bboxes"]
    assert box["min"] == {"latitude": -1.0, "longitude": None}
    assert box["max"]["longitude"] is None
