"""
Smoke tests for the health check and the JSON error handlers.
"""


class TestHealthCheck:
    """Tests for the health check endpoint."""

    def test_health_check_returns_200(self, client):
        """The health check should report a reachable database."""
        response = client.get("/health")

        assert response.status_code == 200
        body = response.get_json()
        assert body["status"] == "healthy"
        assert body["services"] == [
            "organization",
            "department",
            "employee",
            "notification",
        ]


class TestErrorHandlers:
    def test_unknown_route_is_json_404(self, client):
        response = client.get("/api/unknown")

        assert response.status_code == 404
        assert response.get_json()["error"] == "not_found"

    def test_non_integer_id_does_not_match(self, client):
        response = client.get("/api/employee/abc")

        assert response.status_code == 404
