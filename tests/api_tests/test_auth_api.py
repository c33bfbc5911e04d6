import datetime

import fastapi
from fastapi.testclient import TestClient

from src.config.manager import settings

AUTH = f"{settings.API_PREFIX}/auth"


def login(client: TestClient, username: str = "admin", password: str = "admin123", **extra: object) -> dict:
    response = client.post(f"{AUTH}/login", json={"username": username, "password": password, **extra})
    assert response.status_code == 200
    return response.json()


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def test_login_with_username(client: TestClient) -> None:
    body = login(client)

    assert body["user"]["username"] == "admin"
    assert body["user"]["firstName"] == "Giuseppe"
    assert "password" not in body["user"]
    assert body["availableRoles"] == ["ADMIN", "HR", "INTERVIEWER"]
    assert body["token"] != body["refreshToken"]
    assert body["expiresIn"] == settings.ACCESS_TOKEN_EXPIRY_SECONDS


def test_login_with_email_and_short_seeded_password(client: TestClient) -> None:
    body = login(client, username="maria.rossi@noiintervistiamo.it", password="hr123")

    assert body["user"]["role"] == "hr"
    assert body["availableRoles"] == ["HR"]


def test_login_remember_me_extends_expiry(client: TestClient) -> None:
    body = login(client, rememberMe=True)

    assert body["expiresIn"] == 7 * 24 * 60 * 60


def test_login_with_wrong_password(client: TestClient) -> None:
    response = client.post(f"{AUTH}/login", json={"username": "admin", "password": "sbagliata"})

    assert response.status_code == 401
    assert response.json()["error"] == "INVALID_CREDENTIALS"


def test_login_requires_both_fields(client: TestClient) -> None:
    response = client.post(f"{AUTH}/login", json={"username": "admin"})

    assert response.status_code == 400
    assert response.json()["details"] == [{"field": "password", "message": "Field required"}]


def test_refresh_rotates_tokens(client: TestClient) -> None:
    refresh_token = login(client)["refreshToken"]

    response = client.post(f"{AUTH}/refresh", json={"refreshToken": refresh_token})
    assert response.status_code == 200
    refreshed = response.json()
    assert refreshed["refreshToken"] != refresh_token
    assert client.get(f"{AUTH}/profile", headers=bearer(refreshed["token"])).status_code == 200

    reused = client.post(f"{AUTH}/refresh", json={"refreshToken": refresh_token})
    assert reused.status_code == 401
    assert reused.json()["error"] == "INVALID_REFRESH_TOKEN"


def test_logout_revokes_access_token(client: TestClient) -> None:
    token = login(client)["token"]

    assert client.post(f"{AUTH}/logout", headers=bearer(token)).status_code == 204

    response = client.get(f"{AUTH}/profile", headers=bearer(token))
    assert response.status_code == 401
    assert response.json()["error"] == "INVALID_TOKEN"


def test_profile_requires_token(client: TestClient) -> None:
    response = client.get(f"{AUTH}/profile")

    assert response.status_code == 401
    assert response.json()["error"] == "MISSING_TOKEN"


def test_expired_token_is_rejected(client: TestClient, app: fastapi.FastAPI) -> None:
    token = login(client)["token"]
    app.state.store.access_tokens[token].expires_at = datetime.datetime(2020, 1, 1, tzinfo=datetime.timezone.utc)

    response = client.get(f"{AUTH}/profile", headers=bearer(token))

    assert response.status_code == 401
    assert response.json()["error"] == "INVALID_TOKEN"
    assert token not in app.state.store.access_tokens


def test_read_profile(client: TestClient, auth_headers: dict[str, str]) -> None:
    profile = client.get(f"{AUTH}/profile", headers=auth_headers).json()

    assert profile["email"] == "giuseppe.verdi@noiintervistiamo.it"
    assert profile["lastLogin"] is not None
    assert profile["preferences"]["language"] == "it"


def test_update_profile_merges_preferences(client: TestClient, auth_headers: dict[str, str]) -> None:
    response = client.put(
        f"{AUTH}/profile",
        json={"firstName": "Beppe", "preferences": {"notifications": {"push": False}}},
        headers=auth_headers,
    )

    assert response.status_code == 200
    profile = response.json()
    assert profile["firstName"] == "Beppe"
    assert profile["lastName"] == "Verdi"
    assert profile["preferences"]["language"] == "it"
    assert profile["preferences"]["notifications"] == {
        "email": True,
        "push": False,
        "interview": True,
        "evaluation": True,
    }


def test_change_password(client: TestClient, auth_headers: dict[str, str]) -> None:
    response = client.post(
        f"{AUTH}/change-password",
        json={"currentPassword": "admin123", "newPassword": "NuovaPass1"},
        headers=auth_headers,
    )
    assert response.status_code == 204

    assert client.post(f"{AUTH}/login", json={"username": "admin", "password": "admin123"}).status_code == 401
    login(client, password="NuovaPass1")


def test_change_password_with_wrong_current_password(client: TestClient, auth_headers: dict[str, str]) -> None:
    response = client.post(
        f"{AUTH}/change-password",
        json={"currentPassword": "nope", "newPassword": "NuovaPass1"},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_CURRENT_PASSWORD"


def test_change_password_rejects_weak_password(client: TestClient, auth_headers: dict[str, str]) -> None:
    response = client.post(
        f"{AUTH}/change-password",
        json={"currentPassword": "admin123", "newPassword": "debole"},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "newPassword"


def test_forgot_and_reset_password(client: TestClient, app: fastapi.FastAPI) -> None:
    response = client.post(f"{AUTH}/forgot-password", json={"email": "maria.rossi@noiintervistiamo.it"})
    assert response.status_code == 204

    [reset_token] = list(app.state.store.reset_tokens)
    response = client.post(f"{AUTH}/reset-password", json={"token": reset_token, "newPassword": "Ripristino9"})
    assert response.status_code == 204

    login(client, username="hr", password="Ripristino9")

    reused = client.post(f"{AUTH}/reset-password", json={"token": reset_token, "newPassword": "Ripristino9"})
    assert reused.status_code == 400
    assert reused.json()["error"] == "INVALID_RESET_TOKEN"


def test_forgot_password_for_unknown_email_is_silent(client: TestClient, app: fastapi.FastAPI) -> None:
    response = client.post(f"{AUTH}/forgot-password", json={"email": "nessuno@example.com"})

    assert response.status_code == 204
    assert app.state.store.reset_tokens == {}
