import asyncio
import contextlib
import typing

import pytest
from fastapi.testclient import TestClient

from src.config.manager import settings
from src.main import initialize_backend_application

API = settings.API_PREFIX


@pytest.fixture
def build_client(monkeypatch: pytest.MonkeyPatch) -> typing.Iterator[typing.Callable[..., TestClient]]:
    """Create a client for an application built with overridden settings."""
    with contextlib.ExitStack() as stack:

        def _build(**overrides: typing.Any) -> TestClient:
            for name, value in overrides.items():
                monkeypatch.setattr(settings, name, value)
            return stack.enter_context(TestClient(initialize_backend_application()))

        yield _build


def test_health(client: TestClient) -> None:
    response = client.get(f"{API}/health")

    assert response.status_code == 200
    health = response.json()
    assert health["status"] == "OK"
    assert health["version"] == settings.VERSION
    assert health["uptime"] >= 0
    assert health["records"]["users"] == 6
    assert health["records"]["files"] == 4


def test_ping(client: TestClient) -> None:
    response = client.get(f"{API}/ping")

    assert response.status_code == 200
    assert response.text == "pong"
    assert response.headers["content-type"].startswith("text/plain")


def test_unknown_route(client: TestClient) -> None:
    response = client.get(f"{API}/unknown")

    assert response.status_code == 404
    assert response.json() == {"error": "NOT_FOUND", "message": f"Rotta GET {API}/unknown non trovata"}


def test_security_headers(client: TestClient) -> None:
    response = client.get(f"{API}/ping")

    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "SAMEORIGIN"


def test_rate_limit_headers(client: TestClient) -> None:
    response = client.get(f"{API}/roles")

    assert response.headers["x-ratelimit-limit"] == str(settings.RATE_LIMIT_MAX_REQUESTS)
    assert int(response.headers["x-ratelimit-remaining"]) == settings.RATE_LIMIT_MAX_REQUESTS - 1


def test_rate_limit_exceeded(build_client: typing.Callable[..., TestClient]) -> None:
    limited_client = build_client(RATE_LIMIT_MAX_REQUESTS=2, IS_RATE_LIMIT_ENABLED=True)

    assert limited_client.get(f"{API}/roles").status_code == 200
    assert limited_client.get(f"{API}/roles").status_code == 200

    response = limited_client.get(f"{API}/roles")
    assert response.status_code == 429
    assert response.json()["error"] == "RATE_LIMIT_EXCEEDED"
    assert response.headers["x-ratelimit-remaining"] == "0"
    assert "retry-after" in response.headers


def test_oversized_body(build_client: typing.Callable[..., TestClient]) -> None:
    guarded_client = build_client(MAX_BODY_SIZE_MB=0)

    response = guarded_client.post(f"{API}/roles", json={"name": "Grande", "code": "BIG", "color": "#123456"})

    assert response.status_code == 413
    assert response.json()["error"] == "PAYLOAD_TOO_LARGE"


def test_slow_request_times_out(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "REQUEST_TIMEOUT_SECONDS", 0.05)
    app = initialize_backend_application()

    @app.get(f"{API}/slow")
    async def slow() -> dict[str, str]:
        await asyncio.sleep(0.5)
        return {"status": "late"}

    with TestClient(app) as slow_client:
        response = slow_client.get(f"{API}/slow")

    assert response.status_code == 408
    assert response.json() == {"error": "REQUEST_TIMEOUT", "message": "Request timeout"}


def test_unhandled_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "DEBUG", True)
    app = initialize_backend_application()

    @app.get(f"{API}/explode")
    async def explode() -> None:
        raise RuntimeError("kaboom")

    with TestClient(app, raise_server_exceptions=False) as failing_client:
        response = failing_client.get(f"{API}/explode")

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "INTERNAL_SERVER_ERROR"
    assert "RuntimeError: kaboom" in body["details"]


def test_unhandled_error_hides_traceback_without_debug(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "DEBUG", False)
    app = initialize_backend_application()

    @app.get(f"{API}/explode")
    async def explode() -> None:
        raise RuntimeError("kaboom")

    with TestClient(app, raise_server_exceptions=False) as failing_client:
        body = failing_client.get(f"{API}/explode").json()

    assert body == {"error": "INTERNAL_SERVER_ERROR", "message": "Si è verificato un errore imprevisto"}


def test_resources_are_open_by_default(client: TestClient) -> None:
    assert client.get(f"{API}/users").status_code == 200


def test_auth_required_protects_resources(build_client: typing.Callable[..., TestClient]) -> None:
    protected_client = build_client(IS_AUTH_REQUIRED=True)

    response = protected_client.get(f"{API}/users")
    assert response.status_code == 401
    assert response.json()["error"] == "MISSING_TOKEN"

    assert protected_client.get(f"{API}/health").status_code == 200

    login = protected_client.post(f"{API}/auth/login", json={"username": "admin", "password": "admin123"})
    headers = {"Authorization": f"Bearer {login.json()['token']}"}
    assert protected_client.get(f"{API}/users", headers=headers).status_code == 200
    assert protected_client.get(f"{API}/datalist/roles", headers=headers).status_code == 200

    response = protected_client.get(f"{API}/users", headers={"Authorization": "Bearer forged"})
    assert response.json()["error"] == "INVALID_TOKEN"


def test_each_application_has_its_own_store(client: TestClient) -> None:
    client.delete(f"{API}/users/1")

    other_client = TestClient(initialize_backend_application())
    assert other_client.get(f"{API}/users").json()["total"] == 6
