from fastapi.testclient import TestClient


def test_root_banner(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["message"].endswith("is running")
    assert body["database"] == "connected"
    assert body["endpoints"]["translate"] == "POST /translate"


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["database"] == "connected"
    assert body["backgroundTasks"] == {"completed": 0, "failed": 0}


def test_request_id_is_echoed(client: TestClient) -> None:
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_request_id_is_generated(client: TestClient) -> None:
    response = client.get("/health")
    assert response.headers["X-Request-ID"]


def test_security_headers(client: TestClient) -> None:
    response = client.get("/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["Cache-Control"] == "no-store"


def test_error_body_shape(client: TestClient) -> None:
    response = client.get("/api/user/profile")

    assert set(response.json()) == {"error_code", "message", "details"}


def test_malformed_json_is_a_client_error(client: TestClient) -> None:
    response = client.post(
        "/translate",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
