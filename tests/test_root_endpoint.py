"""Tests basiques de l'API FastAPI (endpoints simples)."""


def test_root_endpoint_returns_service_info(client):
    response = client.get("/")
    assert response.status_code == 200

    data = response.json()
    assert data.get("service") == "portfolio-api"
    assert data.get("status") == "operational"


def test_health_check_endpoint_ok(client):
    response = client.get("/health")
    assert response.status_code == 200

    data = response.json()
    assert data.get("status") == "healthy"
    assert data.get("service") == "portfolio-api"
    assert data["store"]["tags"] == 5
    assert data["store"]["projects"] == 0
