from fastapi.testclient import TestClient

from src.config.manager import settings

USERS = f"{settings.API_PREFIX}/users"

NEW_USER = {
    "username": "sara.blu",
    "email": "sara.blu@noiintervistiamo.it",
    "firstName": "Sara",
    "lastName": "Blu",
    "role": "HR_SPECIALIST",
    "department": "Risorse Umane",
}


def test_list_users_returns_paginated_envelope(client: TestClient) -> None:
    response = client.get(USERS)

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"items", "total", "page", "pageSize", "totalPages"}
    assert body["total"] == 6
    assert body["page"] == 1
    assert body["pageSize"] == 10
    assert body["totalPages"] == 1
    assert body["items"][0]["firstName"]


def test_list_users_filters_and_pages(client: TestClient) -> None:
    body = client.get(USERS, params={"department": "Sviluppo Software"}).json()
    assert {user["id"] for user in body["items"]} == {"2", "4"}

    body = client.get(USERS, params={"status": "SUSPENDED"}).json()
    assert [user["username"] for user in body["items"]] == ["paolo.gialli"]

    body = client.get(USERS, params={"activeOnly": "true"}).json()
    assert body["total"] == 5

    body = client.get(USERS, params={"page": 2, "pageSize": 4}).json()
    assert len(body["items"]) == 2
    assert body["totalPages"] == 2


def test_invalid_paging_is_a_validation_error(client: TestClient) -> None:
    response = client.get(USERS, params={"pageSize": 101})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert body["details"][0]["field"] == "pageSize"


def test_create_user(client: TestClient) -> None:
    response = client.post(USERS, json=NEW_USER)

    assert response.status_code == 201
    user = response.json()
    assert user["id"] == "7"
    assert user["roleName"] == "HR Specialist"
    assert user["isActive"] is True
    assert user["deletedAt"] is None

    assert client.get(f"{USERS}/7").json()["username"] == "sara.blu"


def test_create_user_missing_fields_reports_each_field(client: TestClient) -> None:
    response = client.post(USERS, json={"username": "solo.username"})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    fields = {detail["field"] for detail in body["details"]}
    assert {"email", "firstName", "lastName", "role"} <= fields


def test_create_duplicate_user_conflicts(client: TestClient) -> None:
    response = client.post(USERS, json={**NEW_USER, "username": "admin"})

    assert response.status_code == 409
    assert response.json()["error"] == "USER_EXISTS"


def test_unknown_user_is_not_found(client: TestClient) -> None:
    response = client.get(f"{USERS}/999")

    assert response.status_code == 404
    assert response.json() == {"error": "USER_NOT_FOUND", "message": "Utente non trovato"}


def test_update_user_merges_fields(client: TestClient) -> None:
    response = client.put(f"{USERS}/2", json={"department": "IT", "role": "HR_MANAGER"})

    assert response.status_code == 200
    user = response.json()
    assert user["department"] == "IT"
    assert user["roleName"] == "HR Manager"
    assert user["firstName"] == "Giovanni"


def test_update_with_null_required_field_changes_nothing(client: TestClient) -> None:
    response = client.put(f"{USERS}/2", json={"username": "renamed.user", "email": None})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert [detail["field"] for detail in body["details"]] == ["email"]

    user = client.get(f"{USERS}/2").json()
    assert user["username"] == "giovanni.bianchi"
    assert user["email"] is not None


def test_update_unknown_user_is_not_found(client: TestClient) -> None:
    assert client.put(f"{USERS}/999", json={"department": "IT"}).status_code == 404


def test_soft_delete_and_restore_user(client: TestClient) -> None:
    assert client.delete(f"{USERS}/3").status_code == 204

    assert client.get(USERS).json()["total"] == 5
    assert client.get(USERS, params={"showDeleted": "true"}).json()["total"] == 6
    assert client.get(f"{USERS}/3").json()["deletedAt"] is not None

    response = client.patch(f"{USERS}/3/restore")
    assert response.status_code == 200
    assert response.json()["deletedAt"] is None
    assert client.get(USERS).json()["total"] == 6


def test_toggle_user_status(client: TestClient) -> None:
    user = client.patch(f"{USERS}/1/toggle-status").json()

    assert user["isActive"] is False
    assert user["status"] == "INACTIVE"


def test_search_users(client: TestClient) -> None:
    response = client.post(
        f"{USERS}/search",
        json={"page": 1, "pageSize": 2, "filters": {"searchText": "rossi", "roleId": "HR_MANAGER"}},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["currentPage"] == 1
    assert body["totalPages"] == 1
    assert body["users"][0]["username"] == "maria.rossi"


def test_user_stats(client: TestClient) -> None:
    body = client.get(f"{USERS}/stats").json()

    assert body["totalUsers"] == 6
    assert body["activeUsers"] == 4
    assert body["usersByRole"]["TECH_LEAD"] == 1
