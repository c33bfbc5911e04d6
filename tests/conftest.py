import typing

import fastapi
import pytest
from fastapi.testclient import TestClient

from src.config.manager import settings
from src.main import initialize_backend_application
from src.repository.store import InMemoryStore

API = settings.API_PREFIX


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def app() -> fastapi.FastAPI:
    return initialize_backend_application()


@pytest.fixture
def client(app: fastapi.FastAPI) -> typing.Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client: TestClient) -> dict[str, str]:
    response = client.post(f"{API}/auth/login", json={"username": "admin", "password": "admin123"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
