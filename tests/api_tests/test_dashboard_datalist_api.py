from fastapi.testclient import TestClient

from src.config.manager import settings

DASHBOARD = f"{settings.API_PREFIX}/dashboard"
DATALIST = f"{settings.API_PREFIX}/datalist"


def test_dashboard_stats_are_strings(client: TestClient) -> None:
    stats = client.get(f"{DASHBOARD}/stats").json()

    assert stats == {"totalUsers": "6", "activeInterviews": "2", "pendingEvaluations": "0", "systemAlerts": "2"}


def test_dashboard_stats_follow_the_store(client: TestClient) -> None:
    client.delete(f"{settings.API_PREFIX}/users/2")
    client.put(f"{settings.API_PREFIX}/interviews/2", json={"status": "completed"})

    stats = client.get(f"{DASHBOARD}/stats").json()

    assert stats["totalUsers"] == "5"
    assert stats["activeInterviews"] == "1"
    assert stats["pendingEvaluations"] == "1"


def test_dashboard_overview(client: TestClient) -> None:
    overview = client.get(f"{DASHBOARD}/overview").json()

    assert overview["stats"]["totalUsers"] == "6"
    assert [chart["id"] for chart in overview["charts"]] == ["interviews-monthly", "evaluations-status", "candidate-flow"]
    assert len(overview["alerts"]) == 2
    assert len(overview["recentActivity"]) == 3


def test_dashboard_charts_by_period(client: TestClient) -> None:
    charts = client.get(f"{DASHBOARD}/charts", params={"period": "week"}).json()
    assert [chart["id"] for chart in charts] == ["evaluations-status"]

    assert client.get(f"{DASHBOARD}/charts", params={"period": "decade"}).status_code == 400


def test_mark_alert_as_read(client: TestClient) -> None:
    response = client.put(f"{DASHBOARD}/alerts/1/read")
    assert response.status_code == 200
    assert response.json()["read"] is True

    unread = client.get(f"{DASHBOARD}/alerts", params={"unread": "true"}).json()
    assert [alert["id"] for alert in unread] == ["2"]
    assert client.get(f"{DASHBOARD}/stats").json()["systemAlerts"] == "1"


def test_unknown_alert(client: TestClient) -> None:
    response = client.put(f"{DASHBOARD}/alerts/9/read")

    assert response.status_code == 404
    assert response.json()["error"] == "ALERT_NOT_FOUND"


def test_datalist_roles_are_sorted_by_name(client: TestClient) -> None:
    roles = client.get(f"{DATALIST}/roles").json()

    assert [role["name"] for role in roles][:3] == ["Amministratore", "Candidato", "Frontend Developer"]
    assert set(roles[0]) == {"id", "name", "code", "color"}


def test_datalist_roles_skip_inactive_roles(client: TestClient) -> None:
    client.patch(f"{settings.API_PREFIX}/roles/8/toggle-status")

    names = [role["name"] for role in client.get(f"{DATALIST}/roles").json()]

    assert len(names) == 7
    assert "Candidato" not in names


def test_datalist_departments(client: TestClient) -> None:
    client.delete(f"{settings.API_PREFIX}/departments/6")

    departments = client.get(f"{DATALIST}/departments").json()

    assert [department["name"] for department in departments] == [
        "Amministrazione",
        "Marketing",
        "Risorse Umane",
        "Sviluppo Software",
        "Vendite",
    ]


def test_datalist_user_statuses(client: TestClient) -> None:
    statuses = client.get(f"{DATALIST}/user-statuses").json()

    assert [status["value"] for status in statuses] == ["Attivo", "Inattivo", "In attesa", "Sospeso"]
    assert statuses[0] == {"value": "Attivo", "label": "Attivo", "icon": "fas fa-check-circle", "color": "#10b981"}


def test_datalist_access_areas(client: TestClient) -> None:
    areas = client.get(f"{DATALIST}/user-access-areas").json()

    assert [area["id"] for area in areas] == [
        "hasHRAccess",
        "hasTechnicalAccess",
        "hasAdminAccess",
        "hasCandidateAccess",
    ]


def test_datalist_color_palettes(client: TestClient) -> None:
    palettes = client.get(f"{DATALIST}/user-color-palettes").json()

    assert palettes[0]["id"] == "default"
    assert len(palettes[0]["colors"]) == 10
