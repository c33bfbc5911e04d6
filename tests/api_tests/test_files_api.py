import io

import PyPDF2
import pytest
from PIL import Image
from fastapi.testclient import TestClient

from src.config.manager import settings

FILES = f"{settings.API_PREFIX}/files"


def build_pdf(pages: int) -> bytes:
    writer = PyPDF2.PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=595, height=842)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


PDF_BYTES = build_pdf(2)


def test_list_files(client: TestClient) -> None:
    body = client.get(FILES).json()

    assert body["total"] == 4
    assert body["items"][0]["url"].endswith("/download")


def test_file_filters(client: TestClient) -> None:
    def ids(**params: str) -> set[str]:
        return {file["id"] for file in client.get(FILES, params=params).json()["items"]}

    assert ids(category="cv") == {"1"}
    assert ids(entityType="candidate", entityId="2") == {"2", "4"}
    assert ids(uploadedBy="2") == {"2", "3"}
    assert ids(mimetype="image") == {"3"}
    assert ids(minSize="300000", maxSize="600000") == {"1", "4"}
    assert ids(tags="luca-giallo") == {"2", "4"}
    assert ids(search="aws") == {"4"}


def test_upload_files(client: TestClient, auth_headers: dict[str, str]) -> None:
    response = client.post(
        f"{FILES}/upload",
        files=[
            ("files", ("CV Giulia.pdf", PDF_BYTES, "application/pdf")),
            ("files", ("note.txt", b"appunti", "text/plain")),
        ],
        data={"category": "cv", "entityType": "candidate", "entityId": "3", "isPublic": "true", "tags": "cv, nuova"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    uploaded = response.json()
    assert [file["id"] for file in uploaded] == ["5", "6"]

    cv = uploaded[0]
    assert cv["originalName"] == "CV Giulia.pdf"
    assert cv["size"] == len(PDF_BYTES)
    assert cv["mimetype"] == "application/pdf"
    assert cv["metadata"] == {"pages": 2}
    assert cv["tags"] == ["cv", "nuova"]
    assert cv["isPublic"] is True
    assert cv["path"].startswith("/uploads/candidate/cv/CV Giulia-")
    assert cv["url"] == f"{FILES}/5/download"

    assert client.get(FILES).json()["total"] == 6


def test_upload_without_token_is_attributed_to_administrator(client: TestClient) -> None:
    response = client.post(f"{FILES}/upload", files={"files": ("note.txt", b"ciao", "text/plain")})

    assert response.status_code == 201
    uploaded = response.json()[0]
    assert uploaded["uploadedBy"] == "1"
    assert uploaded["category"] == "other"
    assert uploaded["entityType"] == "system"
    assert uploaded["path"].startswith("/uploads/system/other/note-")


def test_upload_jpeg_records_dimensions(client: TestClient) -> None:
    buffer = io.BytesIO()
    Image.new("RGB", (320, 200), color="navy").save(buffer, format="JPEG")

    response = client.post(f"{FILES}/upload", files={"files": ("foto.jpg", buffer.getvalue(), "image/jpeg")})

    assert response.status_code == 201
    assert response.json()[0]["metadata"] == {"width": 320, "height": 200}


def test_upload_without_files(client: TestClient) -> None:
    response = client.post(f"{FILES}/upload", data={"category": "cv"})

    assert response.status_code == 400
    assert response.json()["error"] == "NO_FILES_UPLOADED"


def test_upload_rejects_unknown_mimetype_and_stores_nothing(client: TestClient) -> None:
    response = client.post(
        f"{FILES}/upload",
        files=[
            ("files", ("ok.txt", b"ok", "text/plain")),
            ("files", ("setup.exe", b"MZ", "application/x-msdownload")),
        ],
    )

    assert response.status_code == 400
    assert response.json()["error"] == "FILE_TYPE_NOT_ALLOWED"
    assert client.get(FILES).json()["total"] == 4


def test_upload_rejects_too_many_files(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "MAX_UPLOAD_FILES", 1)

    response = client.post(
        f"{FILES}/upload",
        files=[("files", ("a.txt", b"a", "text/plain")), ("files", ("b.txt", b"b", "text/plain"))],
    )

    assert response.status_code == 400
    assert response.json()["error"] == "TOO_MANY_FILES"


def test_upload_rejects_oversized_file(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_MB", 0)

    response = client.post(f"{FILES}/upload", files={"files": ("a.txt", b"a", "text/plain")})

    assert response.status_code == 413
    assert response.json()["error"] == "FILE_TOO_LARGE"


def test_download_uploaded_file(client: TestClient) -> None:
    client.post(f"{FILES}/upload", files={"files": ("relazione finale.txt", b"contenuto", "text/plain")})

    response = client.get(f"{FILES}/5/download")

    assert response.status_code == 200
    assert response.content == b"contenuto"
    assert response.headers["content-type"].startswith("text/plain")
    assert response.headers["content-disposition"] == "attachment; filename*=UTF-8''relazione%20finale.txt"


def test_download_seeded_file_serves_placeholder(client: TestClient) -> None:
    response = client.get(f"{FILES}/1/download")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert b"CV_Sara_Blu.pdf" in response.content


def test_file_detail(client: TestClient) -> None:
    detail = client.get(f"{FILES}/3").json()
    assert detail["file"]["originalName"] == "profile_photo.jpg"
    assert detail["downloadUrl"] == f"{FILES}/3/download"
    assert detail["thumbnailUrl"] == f"{FILES}/3/download?size=thumbnail"

    assert client.get(f"{FILES}/1").json()["thumbnailUrl"] is None


def test_update_file_keeps_upload_provenance(client: TestClient) -> None:
    response = client.put(f"{FILES}/1", json={"description": "CV aggiornato", "uploadedBy": "9", "size": 1})

    assert response.status_code == 200
    file = response.json()
    assert file["description"] == "CV aggiornato"
    assert file["uploadedBy"] == "1"
    assert file["size"] == 524288


def test_unknown_file(client: TestClient) -> None:
    response = client.get(f"{FILES}/99/download")

    assert response.status_code == 404
    assert response.json()["error"] == "FILE_NOT_FOUND"


def test_file_stats(client: TestClient) -> None:
    stats = client.get(f"{FILES}/stats").json()

    assert stats["totalFiles"] == 4
    assert stats["totalSize"] == 2084864
    assert stats["storageUsed"] == 2084864
    assert stats["filesByCategory"]["cv"] == 1
    assert stats["filesByType"] == {"image": 1, "pdf": 3, "document": 0, "video": 0, "audio": 0, "other": 0}


def test_batches(client: TestClient) -> None:
    assert len(client.get(f"{FILES}/batches").json()) == 2

    response = client.post(f"{FILES}/batches", json={"name": "Documenti Luca", "files": ["2", "4"]})
    assert response.status_code == 201
    batch = response.json()
    assert batch["id"] == "3"
    assert batch["createdBy"] == "1"
    assert batch["files"] == ["2", "4"]

    assert len(client.get(f"{FILES}/batches").json()) == 3


def test_batch_with_unknown_file(client: TestClient) -> None:
    response = client.post(f"{FILES}/batches", json={"name": "Vuoto", "files": ["404"]})

    assert response.status_code == 404
    assert response.json()["error"] == "FILE_NOT_FOUND"


def test_inverted_upload_window_is_rejected(client: TestClient) -> None:
    response = client.get(FILES, params={"uploadedAfter": "2024-03-10T00:00:00", "uploadedBefore": "2024-03-01T00:00:00Z"})

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "uploadedAfter"
