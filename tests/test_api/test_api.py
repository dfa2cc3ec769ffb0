"""Tests for API endpoints."""

from __future__ import annotations

import math

import pytest
from fastapi.testclient import TestClient

from pathsketch.main import app
from tests.conftest import LOGO_D, SQUARE_D


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert set(data["commands_supported"]) == set("mMlLhHvVcCsSzZ")


def test_parse_square():
    response = client.post("/api/paths/parse", json={"d": SQUARE_D})
    assert response.status_code == 200
    data = response.json()
    assert [op["kind"] for op in data["ops"]] == ["move", "line", "line", "line", "close"]
    assert data["ops"][2]["args"] == [10.0, 10.0]
    assert data["d"] == "M0 0 L10 0 L10 10 L0 10 Z"
    assert data["subpaths"] == 1
    assert data["bbox"] == [0.0, 0.0, 10.0, 10.0]
    assert data["length"] == pytest.approx(40.0)
    assert data["area"] == pytest.approx(100.0)
    assert data["winding"] == "CCW"
    assert data["processing_time_ms"] >= 0


def test_parse_logo():
    response = client.post("/api/paths/parse", json={"d": LOGO_D})
    assert response.status_code == 200
    data = response.json()
    assert len(data["ops"]) == 8
    assert data["end_point"] == [105.0, 57.0273]
    assert data["area"] > 0


def test_parse_empty():
    response = client.post("/api/paths/parse", json={"d": "  "})
    assert response.status_code == 200
    data = response.json()
    assert data["ops"] == []
    assert data["end_point"] is None
    assert data["winding"] == "degenerate"


def test_parse_unsupported_command():
    response = client.post("/api/paths/parse", json={"d": "A 5 5 0 0 1 10 10"})
    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "UnsupportedCommand"
    assert "'A'" in data["detail"]


def test_parse_arity_mismatch():
    response = client.post("/api/paths/parse", json={"d": "M10"})
    assert response.status_code == 422
    assert response.json()["error"] == "ArityMismatch"


def test_parse_coordinate_overflow():
    huge = "9" * 308
    response = client.post("/api/paths/parse", json={"d": f"M{huge} 0l{huge} 0"})
    assert response.status_code == 422
    assert response.json()["error"] == "CoordinateOverflow"


def test_parse_non_ascii_digit():
    response = client.post("/api/paths/parse", json={"d": "M٣ 4"})
    assert response.status_code == 422
    assert response.json()["error"] == "MalformedNumber"


def test_parse_winding():
    ccw = client.post("/api/paths/parse", json={"d": "M0 0L10 0L10 10L0 10Z"}).json()
    cw = client.post("/api/paths/parse", json={"d": "M0 0L0 10L10 10L10 0Z"}).json()
    line = client.post("/api/paths/parse", json={"d": "M0 0L10 10"}).json()
    assert (ccw["winding"], cw["winding"], line["winding"]) == ("CCW", "CW", "degenerate")


def test_parse_digit_only_continuation():
    body = {"d": "M0 0l10 0 -10 10", "signed_continuation": False}
    response = client.post("/api/paths/parse", json=body)
    assert response.status_code == 422
    assert response.json()["error"] == "UnsupportedCommand"

    body["signed_continuation"] = True
    assert client.post("/api/paths/parse", json=body).status_code == 200


def test_circle():
    response = client.post("/api/paths/circle", json={"radius": 100, "cx": 256, "cy": 256})
    assert response.status_code == 200
    data = response.json()
    assert data["ops"][0] == {"kind": "move", "args": [356.0, 256.0]}
    assert [op["kind"] for op in data["ops"][1:]] == ["cubic"] * 4
    assert data["length"] == pytest.approx(2 * math.pi * 100, rel=1e-3)
    assert data["winding"] == "CW"


def test_circle_invalid_radius():
    response = client.post("/api/paths/circle", json={"radius": -1})
    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "InvalidRadius"


def test_missing_field():
    response = client.post("/api/paths/parse", json={})
    assert response.status_code == 422
