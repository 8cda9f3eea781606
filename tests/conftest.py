"""
Pytest configuration and fixtures
"""
import os
import sys
import tempfile
from pathlib import Path

import pytest

# Configure the environment before the app modules read it
_db_dir = tempfile.mkdtemp(prefix="practice-tracker-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_db_dir).as_posix()}/test.db"
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ["REQUIRE_EMAIL_CONFIRMATION"] = "false"
os.environ.pop("JUDGE0_API_KEY", None)
os.environ.pop("APP_CONFIG_PATH", None)

# Add src to Python path
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from fastapi.testclient import TestClient

from api.main import app
from models.database import SessionLocal, create_tables, drop_tables


@pytest.fixture(autouse=True)
def fresh_database():
    """Recreate every table so each test starts empty"""
    drop_tables()
    create_tables()
    yield


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def register_and_login(client, email="ada@example.com", password="secret123", full_name="Ada Lovelace"):
    response = client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "full_name": full_name},
    )
    assert response.status_code == 201, response.text
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return register_and_login(client)


@pytest.fixture
def other_auth_headers(client):
    return register_and_login(client, email="grace@example.com", full_name="Grace Hopper")


@pytest.fixture
def make_problem(client, auth_headers):
    """Create a problem through the API and return its JSON"""
    def _make(**overrides):
        payload = {
            "title": "Two Sum",
            "difficulty": "Easy",
            "category": "Array",
            "tags": ["hash-map"],
        }
        payload.update(overrides)
        response = client.post("/api/problems", json=payload, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()
    return _make
