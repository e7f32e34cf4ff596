"""Integration test for the health endpoint."""

from __future__ import annotations


def test_health_reports_db_and_version(client, app) -> None:
    resp = client.get("/api/v1/health")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "ok"
    assert body["db"] == "ok"
    assert body["version"] == app.config["APP_VERSION"]


def test_cors_headers_for_allowed_origin(client) -> None:
    resp = client.get("/api/v1/health", headers={"Origin": "http://localhost:5173"})

    assert resp.headers["Access-Control-Allow-Origin"] == "http://localhost:5173"
