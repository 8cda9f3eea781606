"""
Tests for the code compiler routes
"""


class TestCompilerRoutes:
    """Test /api/compiler"""

    def test_templates(self, client):
        response = client.get("/api/compiler/templates")
        assert response.status_code == 200
        languages = [t["language"] for t in response.json()]
        assert languages == ["javascript", "python", "java", "cpp"]

    def test_execute_mocks_without_judge(self, client, auth_headers, monkeypatch):
        monkeypatch.delenv("JUDGE0_API_KEY", raising=False)
        response = client.post(
            "/api/compiler/execute",
            json={"language": "Python", "source_code": 'print("Hello, LeetCode!")'},
            headers=auth_headers,
        )
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["mocked"] is True
        assert body["output"] == "Hello, LeetCode!\n"

    def test_unsupported_language(self, client, auth_headers):
        response = client.post(
            "/api/compiler/execute", json={"language": "rust", "source_code": "fn main() {}"},
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_execute_requires_login(self, client):
        response = client.post("/api/compiler/execute", json={"language": "python", "source_code": "print(1)"})
        assert response.status_code in (401, 403)
