"""
Tests for the projections API endpoints.
"""

import pytest


class TestDefaultsEndpoint:
    """Test GET /api/projections/defaults."""

    def test_returns_default_config(self, client):
        """Defaults endpoint returns the default configuration."""
        response = client.get("/api/projections/defaults")

        assert response.status_code == 200
        data = response.get_json()
        assert data["gen1"]["real_estate_value"] == 400000
        assert data["rebuild_options"]["kind"] == "rebuild"


class TestProjectionEndpoint:
    """Test POST /api/projections."""

    def test_empty_body_uses_defaults(self, client):
        """An empty body projects the defaults."""
        response = client.post("/api/projections", json={})

        assert response.status_code == 200
        data = response.get_json()
        assert set(data["scenarios"]) == {"facility", "casita", "rebuild"}
        facility = data["scenarios"]["facility"]
        assert [s["year"] for s in facility["snapshots"]] == [5, 10, 15]
        assert data["auto_down_payment_percent"] == 100

    def test_no_body_uses_defaults(self, client):
        """A missing body projects the defaults."""
        response = client.post("/api/projections")

        assert response.status_code == 200

    def test_override_changes_rebuild_mortgage(self, client):
        """Partial overrides reach the rebuild setup."""
        response = client.post(
            "/api/projections",
            json={"rebuild_options": {"manual_down_payment_percent": 50}},
        )

        assert response.status_code == 200
        setup = response.get_json()["scenarios"]["rebuild"]["setup"]
        assert setup["down_payment_percent"] == 50
        assert setup["financed_amount"] == pytest.approx(500000)

    def test_invalid_config_returns_400(self, client):
        """Invalid values return the validation errors."""
        response = client.post(
            "/api/projections", json={"gen1": {"liquid_assets": -5}}
        )

        assert response.status_code == 400
        data = response.get_json()
        assert data["error"] == "Invalid configuration"
        assert data["details"][0]["loc"] == ["gen1", "liquid_assets"]

    def test_non_object_body_returns_400(self, client):
        """A non-object body is rejected."""
        response = client.post("/api/projections", json=[1, 2, 3])

        assert response.status_code == 400
        assert "JSON object" in response.get_json()["error"]
