"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from tessellate.config import Settings
from tessellate.dependencies import get_settings
from tessellate.main import app, create_app
from tessellate.models.requests import MAX_GRID_DIMENSION


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["commands_registered"] == 4


def test_list_commands():
    response = client.get("/api/commands")
    assert response.status_code == 200
    ids = {c["id"] for c in response.json()["commands"]}
    assert ids == {
        "grid.tessellateDiamond",
        "grid.tessellateHexagon",
        "stamp.createHexagon",
        "stamp.tessellateHexagon",
    }


def test_diamond_with_overrides():
    response = client.post(
        "/api/commands/grid.tessellateDiamond",
        json={"across": 5, "down": 2, "size": 40, "scale": 1.0},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["command"] == "grid.tessellateDiamond"
    assert data["shape_count"] == 10
    assert data["svg"].count("<polygon") == 10
    assert data["group_id"].startswith("group-")


def test_stamp_defaults():
    response = client.post("/api/commands/stamp.tessellateHexagon")
    assert response.status_code == 200
    data = response.json()
    assert data["shape_count"] == 96
    assert data["discarded"] == 1
    assert data["svg"].count("<polygon") == 96


def test_custom_palette():
    response = client.post(
        "/api/commands/grid.tessellateHexagon",
        json={"across": 2, "down": 1, "palette": ["#ff0000", "00ff00"]},
    )
    assert response.status_code == 200
    svg = response.json()["svg"]
    assert 'fill="#ff0000"' in svg
    assert 'fill="#00ff00"' in svg


def test_create_hexagon():
    response = client.post("/api/commands/stamp.createHexagon", json={})
    assert response.status_code == 200
    data = response.json()
    assert data["shape_count"] == 1
    assert data["group_id"] is None
    assert 'fill="#0000ff"' in data["svg"]


def test_unknown_command():
    response = client.post("/api/commands/grid.tessellateOctagon")
    assert response.status_code == 404


def _error_fields(response) -> set[str]:
    return {err["loc"][-1] for err in response.json()["detail"]}


def test_non_positive_dimension():
    response = client.post("/api/commands/grid.tessellateDiamond", json={"across": 0})
    assert response.status_code == 422
    assert _error_fields(response) == {"across"}


def test_oversized_grid():
    response = client.post(
        "/api/commands/stamp.tessellateHexagon",
        json={"across": MAX_GRID_DIMENSION + 1, "down": 2},
    )
    assert response.status_code == 422
    assert _error_fields(response) == {"across"}


def test_infinite_size():
    # 1e400 overflows to inf when the body is decoded
    response = client.post(
        "/api/commands/grid.tessellateDiamond",
        content='{"across": 2, "down": 1, "size": 1e400}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
    assert _error_fields(response) == {"size"}


def test_nan_scale():
    response = client.post(
        "/api/commands/grid.tessellateHexagon",
        content='{"scale": NaN}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422


def test_non_finite_configured_default():
    app.dependency_overrides[get_settings] = lambda: Settings(default_size=float("nan"))
    try:
        response = client.post("/api/commands/grid.tessellateDiamond", json={"across": 2, "down": 1})
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 422
    assert "size" in response.json()["detail"]


def test_bad_color():
    response = client.post("/api/commands/grid.tessellateDiamond", json={"palette": ["nope"]})
    assert response.status_code == 422


def test_malformed_body():
    response = client.post("/api/commands/grid.tessellateDiamond", json={"across": "many"})
    assert response.status_code == 422


def test_cors_origins_from_settings():
    custom = TestClient(create_app(Settings(cors_origins=["http://editor.example"])))
    response = custom.get("/api/health", headers={"Origin": "http://editor.example"})
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://editor.example"

    response = custom.get("/api/health", headers={"Origin": "http://elsewhere.example"})
    assert "access-control-allow-origin" not in response.headers


def test_app_settings_supply_defaults():
    custom = TestClient(create_app(Settings(default_across=2, default_down=1)))
    response = custom.post("/api/commands/grid.tessellateDiamond")
    assert response.status_code == 200
    assert response.json()["shape_count"] == 2
