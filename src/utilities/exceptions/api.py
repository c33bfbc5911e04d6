"""
Error classes understood by the central exception handlers.

Each class carries the HTTP status, the machine-readable ``code`` and a default
(Italian) message that ends up in the ``{error, message, details}`` payload.
"""

import typing

import fastapi


class APIError(Exception):
    status_code: int = fastapi.status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_SERVER_ERROR"
    default_message: str = "Errore interno del server"

    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        details: typing.Any = None,
    ) -> None:
        self.message = message or self.default_message
        if code is not None:
            self.code = code
        self.details = details
        super().__init__(self.message)


class BadRequestError(APIError):
    status_code = fastapi.status.HTTP_400_BAD_REQUEST
    code = "BAD_REQUEST"
    default_message = "Richiesta non valida"


class ValidationError(BadRequestError):
    code = "VALIDATION_ERROR"
    default_message = "Validazione fallita"

    def __init__(self, field: str, message: str, *, code: str | None = None) -> None:
        self.field = field
        super().__init__(code=code, details=[{"field": field, "message": message}])


class UnauthorizedError(APIError):
    status_code = fastapi.status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHORIZED"
    default_message = "Accesso non autorizzato"


class ForbiddenError(APIError):
    status_code = fastapi.status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"
    default_message = "Accesso vietato"


class NotFoundError(APIError):
    status_code = fastapi.status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    default_message = "Risorsa non trovata"


class RequestTimeoutError(APIError):
    status_code = fastapi.status.HTTP_408_REQUEST_TIMEOUT
    code = "REQUEST_TIMEOUT"
    default_message = "Request timeout"


class ConflictError(APIError):
    status_code = fastapi.status.HTTP_409_CONFLICT
    code = "CONFLICT"
    default_message = "Conflitto risorsa"


class PayloadTooLargeError(APIError):
    status_code = fastapi.status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    code = "PAYLOAD_TOO_LARGE"
    default_message = "Corpo della richiesta troppo grande"


class RateLimitExceededError(APIError):
    status_code = fastapi.status.HTTP_429_TOO_MANY_REQUESTS
    code = "RATE_LIMIT_EXCEEDED"
    default_message = "Troppe richieste, riprova più tardi"


class InternalServerError(APIError):
    pass


def build_error_payload(*, code: str, message: str, details: typing.Any = None) -> dict[str, typing.Any]:
    payload: dict[str, typing.Any] = {"error": code, "message": message}
    if details is not None:
        payload["details"] = details
    return payload
