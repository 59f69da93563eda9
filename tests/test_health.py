"""Tests for the health check endpoint."""

import json


def test_healthz_ok(client):
    """Test that the health endpoint returns 200 with correct JSON."""
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.content_type == "application/json"

    data = json.loads(response.data)
    assert data == {"status": "ok"}


def test_app_uses_testing_environment(app):
    """App factory applies the testing environment from APP_ENV."""
    assert app.config["ENV"] == "testing"
    assert app.config["TESTING"] is True
    assert app.config["DEBUG"] is False
