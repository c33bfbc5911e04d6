from fastapi.testclient import TestClient

from src.config.manager import settings

NOTIFICATIONS = f"{settings.API_PREFIX}/notifications"


def ids_of(response_body: dict) -> set[str]:
    return {notification["id"] for notification in response_body["items"]}


def test_notifications_default_to_first_user(client: TestClient) -> None:
    body = client.get(NOTIFICATIONS).json()

    assert ids_of(body) == {"2", "3", "4", "6"}


def test_notifications_for_other_user(client: TestClient) -> None:
    body = client.get(NOTIFICATIONS, params={"userId": "2"}).json()

    assert ids_of(body) == {"1", "2", "5", "6"}


def test_notification_filters(client: TestClient) -> None:
    assert ids_of(client.get(NOTIFICATIONS, params={"isRead": "false"}).json()) == {"3", "6"}
    assert ids_of(client.get(NOTIFICATIONS, params={"type": "system"}).json()) == {"4"}
    assert ids_of(client.get(NOTIFICATIONS, params={"priority": "high", "userId": "2"}).json()) == {"1", "6"}


def test_notification_is_hidden_from_non_recipients(client: TestClient) -> None:
    assert client.get(f"{NOTIFICATIONS}/1", params={"userId": "2"}).status_code == 200

    response = client.get(f"{NOTIFICATIONS}/1", params={"userId": "1"})
    assert response.status_code == 404
    assert response.json()["error"] == "NOTIFICATION_NOT_FOUND"


def test_non_recipient_cannot_change_notification(client: TestClient) -> None:
    delete_response = client.delete(f"{NOTIFICATIONS}/1", params={"userId": "1"})
    assert delete_response.status_code == 404
    assert delete_response.json()["error"] == "NOTIFICATION_NOT_FOUND"

    assert client.put(f"{NOTIFICATIONS}/1", json={"title": "Modificata"}).status_code == 404
    assert client.patch(f"{NOTIFICATIONS}/1/restore").status_code == 404
    assert client.patch(f"{NOTIFICATIONS}/1/toggle-status").status_code == 404

    notification = client.get(f"{NOTIFICATIONS}/1", params={"userId": "2"}).json()
    assert notification["deletedAt"] is None
    assert notification["isActive"] is True
    assert notification["title"] != "Modificata"


def test_recipient_can_delete_notification(client: TestClient) -> None:
    assert client.delete(f"{NOTIFICATIONS}/1", params={"userId": "2"}).status_code == 204
    assert "1" not in ids_of(client.get(NOTIFICATIONS, params={"userId": "2"}).json())


def test_unread_count_and_mark_as_read(client: TestClient) -> None:
    assert client.get(f"{NOTIFICATIONS}/unread-count").json() == {"count": 2}

    response = client.put(f"{NOTIFICATIONS}/3/read")
    assert response.status_code == 200
    assert response.json()["isRead"] is True
    assert response.json()["readAt"] is not None

    assert client.get(f"{NOTIFICATIONS}/unread-count").json() == {"count": 1}


def test_mark_all_read(client: TestClient) -> None:
    response = client.put(f"{NOTIFICATIONS}/mark-all-read")

    assert response.status_code == 200
    assert response.json() == {"markedCount": 2}
    assert client.get(f"{NOTIFICATIONS}/unread-count").json() == {"count": 0}
    assert client.put(f"{NOTIFICATIONS}/mark-all-read").json() == {"markedCount": 0}


def test_create_notification(client: TestClient) -> None:
    response = client.post(
        NOTIFICATIONS,
        json={"type": "reminder", "title": "Promemoria", "message": "Compila la valutazione", "recipients": ["3"]},
    )

    assert response.status_code == 201
    notification = response.json()
    assert notification["id"] == "7"
    assert notification["priority"] == "medium"
    assert notification["isRead"] is False
    assert notification["sender"]["type"] == "system"

    assert ids_of(client.get(NOTIFICATIONS, params={"userId": "3"}).json()) == {"7"}


def test_create_notification_requires_recipients(client: TestClient) -> None:
    response = client.post(
        NOTIFICATIONS, json={"type": "reminder", "title": "Promemoria", "message": "Testo", "recipients": []}
    )

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "recipients"


def test_notification_stats(client: TestClient) -> None:
    stats = client.get(f"{NOTIFICATIONS}/stats").json()

    assert stats["totalNotifications"] == 4
    assert stats["unreadNotifications"] == 2
    assert stats["notificationsByType"]["system"] == 1
    assert stats["notificationsByPriority"]["urgent"] == 0


def test_deleted_notifications_are_hidden_unless_requested(client: TestClient) -> None:
    assert client.delete(f"{NOTIFICATIONS}/4").status_code == 204

    assert "4" not in ids_of(client.get(NOTIFICATIONS).json())
    assert "4" in ids_of(client.get(NOTIFICATIONS, params={"showDeleted": "true"}).json())
    assert client.patch(f"{NOTIFICATIONS}/4/restore").json()["deletedAt"] is None


def test_preferences(client: TestClient) -> None:
    preferences = client.get(f"{NOTIFICATIONS}/preferences").json()
    assert preferences["userId"] == "1"
    assert preferences["quietHours"]["enabled"] is True

    response = client.put(f"{NOTIFICATIONS}/preferences", json={"frequency": "daily"})
    assert response.status_code == 200
    assert response.json()["frequency"] == "daily"
    assert response.json()["quietHours"]["startTime"] == "22:00"


def test_preferences_of_user_without_settings_use_defaults(client: TestClient) -> None:
    preferences = client.get(f"{NOTIFICATIONS}/preferences", params={"userId": "5"}).json()

    assert preferences["frequency"] == "immediate"
    assert preferences["channels"] == {"email": True, "push": True, "inApp": True}


def test_preferences_reject_unknown_frequency(client: TestClient) -> None:
    response = client.put(f"{NOTIFICATIONS}/preferences", json={"frequency": "yearly"})

    assert response.status_code == 400


def test_templates(client: TestClient) -> None:
    assert len(client.get(f"{NOTIFICATIONS}/templates").json()) == 2

    templates = client.get(f"{NOTIFICATIONS}/templates", params={"type": "candidate"}).json()
    assert [template["name"] for template in templates] == ["New Candidate"]
