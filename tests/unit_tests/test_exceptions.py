import fastapi
import pytest
from fastapi.testclient import TestClient

from src.utilities.exceptions.api import (
    APIError,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    InternalServerError,
    NotFoundError,
    PayloadTooLargeError,
    RateLimitExceededError,
    RequestTimeoutError,
    UnauthorizedError,
    ValidationError,
    build_error_payload,
)
from src.utilities.exceptions.database import EntityAlreadyExists, EntityDoesNotExist
from src.utilities.exceptions.handlers import register_exception_handlers


def build_failing_app(error: APIError) -> fastapi.FastAPI:
    app = fastapi.FastAPI()
    register_exception_handlers(backend_app=app)

    @app.get("/fail")
    async def fail() -> None:
        raise error

    return app


@pytest.mark.parametrize(
    "error, status_code, code",
    [
        (BadRequestError(), 400, "BAD_REQUEST"),
        (UnauthorizedError(), 401, "UNAUTHORIZED"),
        (ForbiddenError(), 403, "FORBIDDEN"),
        (NotFoundError(), 404, "NOT_FOUND"),
        (RequestTimeoutError(), 408, "REQUEST_TIMEOUT"),
        (ConflictError(), 409, "CONFLICT"),
        (PayloadTooLargeError(), 413, "PAYLOAD_TOO_LARGE"),
        (RateLimitExceededError(), 429, "RATE_LIMIT_EXCEEDED"),
        (InternalServerError(), 500, "INTERNAL_SERVER_ERROR"),
        (EntityDoesNotExist("Candidato non trovato", code="CANDIDATE_NOT_FOUND"), 404, "CANDIDATE_NOT_FOUND"),
        (EntityAlreadyExists("Ruolo esistente", code="ROLE_EXISTS"), 409, "ROLE_EXISTS"),
    ],
)
def test_error_classes_map_to_status_and_code(error: APIError, status_code: int, code: str) -> None:
    response = TestClient(build_failing_app(error)).get("/fail")

    assert response.status_code == status_code
    assert response.json() == {"error": code, "message": error.message}


def test_validation_error_lists_the_field() -> None:
    error = ValidationError("minExp", "Valore troppo alto")

    response = TestClient(build_failing_app(error)).get("/fail")

    assert response.status_code == 400
    assert response.json() == {
        "error": "VALIDATION_ERROR",
        "message": "Validazione fallita",
        "details": [{"field": "minExp", "message": "Valore troppo alto"}],
    }


def test_custom_message_and_code_override_defaults() -> None:
    error = BadRequestError("Nessun file", code="NO_FILES_UPLOADED")

    assert error.code == "NO_FILES_UPLOADED"
    assert error.message == "Nessun file"
    assert BadRequestError().code == "BAD_REQUEST"


def test_error_payload_omits_empty_details() -> None:
    assert build_error_payload(code="X", message="y") == {"error": "X", "message": "y"}
    assert build_error_payload(code="X", message="y", details=[]) == {"error": "X", "message": "y", "details": []}
