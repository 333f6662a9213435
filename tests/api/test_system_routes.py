"""API tests for system routes.

Validates behavior of the root and health endpoints exposed by the system
router, and RFC 7807 formatting of routing errors.
"""

from fastapi.testclient import TestClient

from mintlite.core.config import settings
from mintlite.main import app

client = TestClient(app)


def test_root_endpoint_returns_status_and_version() -> None:
    """Root endpoint should return operational status and app version."""
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()

    assert data["message"] == settings.app_name
    assert data["status"] == "operational"
    assert data["version"] == settings.app_version


def test_health_endpoint_returns_healthy_status() -> None:
    """Health endpoint should return a healthy status indicator."""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_unknown_route_returns_problem_details() -> None:
    """Unknown paths should be reported as RFC 7807 404s."""
    response = client.get("/does-not-exist")

    assert response.status_code == 404
    data = response.json()
    assert data["status"] == 404
    assert data["title"] == "Resource Not Found"
    assert data["instance"] == "/does-not-exist"
