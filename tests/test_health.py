from fastapi import status


def test_health_ok(client):
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_health_ignores_storage_state(broken_client):
    response = broken_client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_cors_allows_any_origin(client):
    response = client.get("/api/students", headers={"Origin": "http://blazor.example"})
    assert response.status_code == status.HTTP_200_OK
    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_preflight(client):
    response = client.options(
        "/api/classes",
        headers={
            "Origin": "http://blazor.example",
            "Access-Control-Request-Method": "GET",
            "Access-Control-Request-Headers": "X-Custom-Header",
        },
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.headers["access-control-allow-origin"] == "*"
