"""
Test health and metrics endpoints.
"""
from colorbox import __version__
from colorbox.config import config


def test_health_check(test_client):
    """Test health check response fields."""
    response = test_client.get("/healthz")

    assert response.status_code == 200
    data = response.json()

    assert data["ok"] is True
    assert data["version"] == __version__
    assert data["service"] == "colorbox"


def test_root(test_client):
    response = test_client.get("/")
    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"


def test_metrics_summary(test_client):
    """Counters reflect work done through the API."""
    session_id = test_client.post("/v1/sessions").json()["session_id"]
    test_client.post(f"/v1/sessions/{session_id}/colors", json={"value": "#ffffff"})
    test_client.post(f"/v1/sessions/{session_id}/colors", json={"value": "#ffffff"})

    response = test_client.get("/metrics")
    assert response.status_code == 200
    data = response.json()
    assert set(data) == {"uptime_seconds", "counters", "timing_stats"}
    assert data["counters"]["colors_added_total"] == 1
    assert data["counters"]["colors_rejected_total_duplicate"] == 1


def test_metrics_disabled(test_client, monkeypatch):
    monkeypatch.setattr(config, "METRICS_ENABLED", False)
    assert test_client.get("/metrics").status_code == 404
