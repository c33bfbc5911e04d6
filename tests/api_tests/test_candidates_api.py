from fastapi.testclient import TestClient

from src.config.manager import settings

CANDIDATES = f"{settings.API_PREFIX}/candidates"

NEW_CANDIDATE = {
    "firstName": "Giulia",
    "lastName": "Arancio",
    "email": "giulia.arancio@example.com",
    "phone": "+39 340 1234567",
    "position": "Data Analyst",
    "experience": 4,
    "source": "LinkedIn",
    "skills": ["Python", "SQL"],
    "tags": ["data"],
}


def test_list_candidates(client: TestClient) -> None:
    body = client.get(CANDIDATES).json()

    assert body["total"] == 4
    assert body["items"][0]["workHistory"] is not None


def test_candidate_filters(client: TestClient) -> None:
    def ids(**params: str) -> set[str]:
        return {candidate["id"] for candidate in client.get(CANDIDATES, params=params).json()["items"]}

    assert ids(status="new") == {"3"}
    assert ids(position="developer") == {"1", "2"}
    assert ids(source="LinkedIn") == {"1"}
    assert ids(skills="angular,docker") == {"1", "2"}
    assert ids(minExp="3", maxExp="5") == {"1", "2"}
    assert ids(priority="high") == {"1", "4"}
    assert ids(tags="junior") == {"3"}
    assert ids(search="scrum") == {"4"}


def test_unknown_status_filter_is_rejected(client: TestClient) -> None:
    response = client.get(CANDIDATES, params={"status": "archived"})

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "status"


def test_create_candidate(client: TestClient) -> None:
    response = client.post(CANDIDATES, json=NEW_CANDIDATE)

    assert response.status_code == 201
    candidate = response.json()
    assert candidate["id"] == "5"
    assert candidate["status"] == "new"
    assert candidate["priority"] == "medium"
    assert candidate["notes"] == []


def test_create_candidate_rejects_bad_phone_and_duplicates(client: TestClient) -> None:
    response = client.post(CANDIDATES, json={**NEW_CANDIDATE, "phone": "12"})
    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "phone"

    response = client.post(CANDIDATES, json={**NEW_CANDIDATE, "email": "sara.blu@example.com"})
    assert response.status_code == 409
    assert response.json()["error"] == "CANDIDATE_EXISTS"


def test_update_candidate_status(client: TestClient) -> None:
    response = client.put(f"{CANDIDATES}/3", json={"status": "screening"})

    assert response.status_code == 200
    assert response.json()["status"] == "screening"


def test_update_candidate_with_null_name_is_rejected(client: TestClient) -> None:
    response = client.put(f"{CANDIDATES}/1", json={"status": "hired", "firstName": None})

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "firstName"
    assert client.get(f"{CANDIDATES}/1").json()["status"] != "hired"


def test_candidate_notes(client: TestClient) -> None:
    notes = client.get(f"{CANDIDATES}/1/notes").json()
    assert len(notes) == 1

    response = client.post(f"{CANDIDATES}/1/notes", json={"content": "Secondo colloquio fissato", "isPrivate": True})
    assert response.status_code == 201
    note = response.json()
    assert note["author"] == "Current User"
    assert note["isPrivate"] is True

    assert len(client.get(f"{CANDIDATES}/1/notes").json()) == 2


def test_note_author_comes_from_bearer_token(client: TestClient, auth_headers: dict[str, str]) -> None:
    response = client.post(f"{CANDIDATES}/2/notes", json={"content": "Ok"}, headers=auth_headers)

    assert response.json()["author"] == "Giuseppe Verdi"


def test_note_without_content_is_rejected(client: TestClient) -> None:
    response = client.post(f"{CANDIDATES}/1/notes", json={"isPrivate": False})

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "content"


def test_notes_of_unknown_candidate(client: TestClient) -> None:
    response = client.get(f"{CANDIDATES}/99/notes")

    assert response.status_code == 404
    assert response.json()["error"] == "CANDIDATE_NOT_FOUND"


def test_candidate_stats(client: TestClient) -> None:
    body = client.get(f"{CANDIDATES}/stats").json()

    assert body["totalCandidates"] == 4
    assert body["hiredCandidates"] == 1
    assert body["candidatesBySource"]["LinkedIn"] == 1
    assert body["averageProcessingTime"] == 7.0


def test_deleted_candidates_leave_stats(client: TestClient) -> None:
    client.delete(f"{CANDIDATES}/4")

    body = client.get(f"{CANDIDATES}/stats").json()
    assert body["totalCandidates"] == 3
    assert body["averageProcessingTime"] == 0


def test_inverted_experience_range_is_rejected(client: TestClient) -> None:
    response = client.get(CANDIDATES, params={"minExp": "6", "maxExp": "2"})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert body["details"][0]["field"] == "minExp"
