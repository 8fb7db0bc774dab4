"""API tests for the health check."""

from sqlalchemy.exc import OperationalError

from app.database import get_db
from main import app


class UnreachableDatabase:
    def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))


def test_health_reports_database_up(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert body["database"] == "up"
    assert body["timestamp"]


def test_health_reports_database_down(client):
    app.dependency_overrides[get_db] = lambda: UnreachableDatabase()

    response = client.get("/api/health")
    assert response.status_code == 503
    body = response.json()
    assert body["ok"] is False
    assert body["database"] == "down"
    assert "connection refused" in body["error"]
    assert body["timestamp"]


def test_health_needs_no_session(client):
    assert client.get("/api/health", headers={"Authorization": "Bearer junk"}).status_code == 200
