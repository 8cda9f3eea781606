"""
Tests for app-level endpoints and middleware
"""


class TestApp:
    """Test root, health and CORS handling"""

    def test_root_lists_endpoints(self, client):
        body = client.get("/").json()
        assert body["message"] == "LeetCode Progress Tracker API"
        assert "problems" in body["endpoints"]

    def test_health(self, client, monkeypatch):
        monkeypatch.delenv("JUDGE0_API_KEY", raising=False)
        body = client.get("/health").json()
        assert body["status"] == "healthy"
        assert body["judge_configured"] is False

    def test_cors_headers_on_errors(self, client):
        response = client.get("/api/problems/1")
        assert response.status_code in (401, 403)
        assert response.headers["access-control-allow-origin"] == "*"

    def test_preflight(self, client):
        response = client.options("/api/problems")
        assert response.status_code == 200
        assert response.headers["access-control-max-age"] == "86400"
