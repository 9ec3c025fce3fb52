from catalog import main
from catalog.config import settings


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["app"] == settings.APP_NAME
    assert response.json()["api"] == settings.API_PREFIX


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_health_detailed_reports_database(client, monkeypatch):
    monkeypatch.setattr(main, "check_db_health", lambda: False)

    response = client.get("/health/detailed")

    assert response.status_code == 200
    assert response.json()["status"] == "degraded"
    assert response.json()["database"] == "disconnected"


def test_unknown_route(client):
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.json() == {"detail": "Endpoint not found", "path": "/nope"}


def test_request_id_header(client):
    response = client.get("/health")

    assert response.headers["X-Request-ID"]
    assert "X-Process-Time" in response.headers


def test_non_object_body_is_422(client):
    response = client.post(f"{settings.API_PREFIX}/genres", json=["Action"])

    assert response.status_code == 422
    assert response.json()["errors"] == {"body": ["The body must be an object."]}
