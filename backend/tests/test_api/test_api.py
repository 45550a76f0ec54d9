"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from funnelgraph.main import app
from tests.conftest import EQUAL_STACKS, RECORDS, TWO_DIM_OBJECT


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"


def test_funnel_one_dimensional():
    response = client.post("/api/funnel", json={"data": [10, 50, 100], "width": 300, "height": 100})
    assert response.status_code == 200
    data = response.json()
    assert data["percentages"] == [10, 50, 100]
    assert data["main_axis"] == [0, 100, 200, 300]
    assert data["composition"] is None
    assert len(data["cross_axis"]) == 2
    assert len(data["paths"]) == 1
    assert data["paths"][0]["d"].startswith("M0,45 C50,45")
    assert data["paths"][0]["d"].endswith(" Z")
    assert data["paths"][0]["winding"] == 1


def test_funnel_records_keep_labels():
    response = client.post("/api/funnel", json={"data": RECORDS, "width": 600, "height": 300})
    assert response.status_code == 200
    assert response.json()["labels"] == ["Impressions", "Add To Cart", "Buy"]


def test_funnel_two_dimensional():
    response = client.post("/api/funnel", json={"data": TWO_DIM_OBJECT, "width": 600, "height": 300})
    assert response.status_code == 200
    data = response.json()
    assert data["sub_labels"] == ["Direct", "Social Media", "Ads"]
    assert data["values"] == [12500, 5700, 930]
    assert data["composition"][0] == [28, 20, 52]
    assert len(data["paths"]) == 3
    assert data["paths"][1]["color"] == ["#A0BBFF", "#EC77FF"]


def test_funnel_vertical():
    response = client.post(
        "/api/funnel",
        json={"data": EQUAL_STACKS, "width": 100, "height": 200, "direction": "vertical"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["direction"] == "vertical"
    assert data["main_axis"] == [0, 100, 200]
    assert data["cross_axis"] == [[25, 0, 0], [50, 50, 50], [75, 100, 100]]
    assert all(p["winding"] == -1 for p in data["paths"])


def test_funnel_default_size():
    response = client.post("/api/funnel", json={"data": [3, 2, 1]})
    assert response.status_code == 200
    data = response.json()
    assert data["width"] == 600
    assert data["height"] == 300


def test_invalid_data_is_422():
    response = client.post("/api/funnel", json={"data": [0, 0, 0]})
    assert response.status_code == 422
    assert response.json()["error"] == "InvalidDataError"


def test_mismatched_rows_are_422():
    response = client.post("/api/funnel", json={"data": [[1, 2], [3]]})
    assert response.status_code == 422
    assert response.json()["error"] == "DimensionMismatchError"


def test_malformed_colors_are_422():
    for colors in ([1, 2], [None, "red"]):
        response = client.post("/api/funnel", json={"data": {"values": [3, 2, 1], "colors": colors}})
        assert response.status_code == 422
        assert response.json()["error"] == "InvalidDataError"


def test_oversized_magnitude_is_422():
    response = client.post("/api/funnel", json={"data": [10**400, 5]})
    assert response.status_code == 422
    assert response.json()["error"] == "InvalidDataError"


def test_missing_values_are_422():
    response = client.post("/api/funnel", json={"data": {"labels": ["a"]}})
    assert response.status_code == 422
    assert response.json()["error"] == "MissingDataError"


def test_svg_endpoint():
    response = client.post("/api/funnel/svg", json={"data": [3, 2, 1], "width": 300, "height": 100})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert response.text.startswith("<svg")
    assert response.text.count("<path ") == 1
