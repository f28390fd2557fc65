"""Tests for the entries API."""

import importlib

from fastapi.testclient import TestClient

from nutritrack.api.app import create_app


def test_health_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_price_entry_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/entries/price", json={"text": "2 rotis with 300ml water"})

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["total_calories"] == 238
    assert data["total_water_ml"] == 300
    rotis, water = data["items"]
    assert rotis["name"] == "rotis"
    assert rotis["weight_source"] == "counted-standard"
    assert rotis["weight_badge"] == "STD SERVING"
    assert rotis["emoji"] == "🫓"
    assert water["is_water"] is True
    assert water["weight_badge"] is None


def test_price_entry_unresolved(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/entries/price", json={"text": "xyzzy"})

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "unresolved"
    assert data["error"].startswith("Couldn't find calorie data")
    assert data["items"][0]["cal"] is None


def test_price_entry_rejects_empty_text(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/entries/price", json={"text": "  "})

    assert response.status_code == 422
    assert response.json()["detail"] == "Please describe what you ate or drank."


def test_asgi_module_builds_app(monkeypatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "openai-key")

    module = importlib.import_module("nutritrack.api.asgi")

    assert module.app.state.container.pricing_service is not None
