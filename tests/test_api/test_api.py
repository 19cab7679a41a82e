"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from pathdata import __version__
from pathdata.main import app
from tests.conftest import BROKEN_SVG, HOME_DOOR_PATH, HOME_OUTLINE_PATH, HOME_SVG


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == __version__


def test_parse_path():
    response = client.post("/api/paths/parse", json={"d": "M0,0 L10,0 l0,10 z"})
    assert response.status_code == 200
    data = response.json()
    assert [p["type"] for p in data["primitives"]] == ["move", "line", "line", "close"]
    assert data["primitives"][2]["to"] == [10.0, 10.0]
    assert data["primitives"][1]["control1"] is None
    assert data["path_data"] == "M0 0L10 0L10 10Z"
    (subpath,) = data["subpaths"]
    assert subpath["closed"] is True
    assert subpath["bbox"] == [0.0, 0.0, 10.0, 10.0]
    assert subpath["winding"] == "CCW"


def test_parse_curve_fields():
    response = client.post("/api/paths/parse", json={"d": "M0,0C0,10 10,10 10,0"})
    curve = response.json()["primitives"][1]
    assert curve == {"type": "curve", "to": [10.0, 0.0], "control1": [0.0, 10.0], "control2": [10.0, 10.0]}


def test_parse_path_rejects_malformed_data():
    response = client.post("/api/paths/parse", json={"d": "M0,0 L1,2 #"})
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["offset"] == 10
    assert detail["fragment"] == "#"


def test_parse_empty_path():
    response = client.post("/api/paths/parse", json={"d": ""})
    assert response.status_code == 200
    assert response.json() == {"primitives": [], "subpaths": [], "path_data": ""}


def test_parse_document():
    response = client.post("/api/paths/document", json={"svg": HOME_SVG})
    assert response.status_code == 200
    data = response.json()
    assert [el["id"] for el in data["elements"]] == ["E1", "E2"]
    assert [el["d"] for el in data["elements"]] == [HOME_DOOR_PATH, HOME_OUTLINE_PATH]
    assert data["errors"] == {}


def test_parse_document_skips_bad_paths():
    response = client.post("/api/paths/document", json={"svg": BROKEN_SVG})
    assert response.status_code == 200
    data = response.json()
    assert [el["id"] for el in data["elements"]] == ["good", "E3"]
    assert data["elements"][1]["d"] == "M0 0 L10 10"
    assert "bad" in data["errors"]
