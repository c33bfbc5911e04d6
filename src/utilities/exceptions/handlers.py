import logging
import traceback

import fastapi
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.config.manager import settings
from src.utilities.exceptions.api import APIError, build_error_payload

logger = logging.getLogger(__name__)

ERROR_CODE_BY_STATUS: dict[int, str] = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    408: "REQUEST_TIMEOUT",
    409: "CONFLICT",
    413: "PAYLOAD_TOO_LARGE",
    429: "RATE_LIMIT_EXCEEDED",
}


def _describe_request(request: fastapi.Request) -> str:
    client = request.client.host if request.client else "unknown"
    user_agent = request.headers.get("user-agent", "Unknown")
    return f"{request.method} {request.url.path} (ip={client}, user-agent={user_agent})"


def _format_validation_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    details: list[dict[str, str]] = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path", "header")]
        details.append({"field": ".".join(location) or "body", "message": error.get("msg", "Valore non valido")})
    return details


async def api_error_handler(request: fastapi.Request, exc: APIError) -> JSONResponse:
    logger.warning("%s -> %s %s: %s", _describe_request(request), exc.status_code, exc.code, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=build_error_payload(code=exc.code, message=exc.message, details=exc.details),
    )


async def validation_error_handler(request: fastapi.Request, exc: RequestValidationError) -> JSONResponse:
    details = _format_validation_errors(exc)
    logger.warning("%s -> 400 VALIDATION_ERROR: %s", _describe_request(request), details)
    return JSONResponse(
        status_code=fastapi.status.HTTP_400_BAD_REQUEST,
        content=build_error_payload(code="VALIDATION_ERROR", message="Validazione fallita", details=details),
    )


async def http_error_handler(request: fastapi.Request, exc: StarletteHTTPException) -> JSONResponse:
    code = ERROR_CODE_BY_STATUS.get(exc.status_code, "REQUEST_ERROR")
    if exc.status_code == fastapi.status.HTTP_404_NOT_FOUND:
        message = f"Rotta {request.method} {request.url.path} non trovata"
    else:
        message = exc.detail if isinstance(exc.detail, str) else "Richiesta non riuscita"
    logger.warning("%s -> %s %s", _describe_request(request), exc.status_code, code)
    return JSONResponse(
        status_code=exc.status_code,
        content=build_error_payload(code=code, message=message),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: fastapi.Request, exc: Exception) -> JSONResponse:
    logger.error("%s -> 500 %s: %s", _describe_request(request), type(exc).__name__, exc, exc_info=exc)
    details = "".join(traceback.format_exception(exc)) if settings.DEBUG else None
    return JSONResponse(
        status_code=fastapi.status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=build_error_payload(
            code="INTERNAL_SERVER_ERROR",
            message="Si è verificato un errore imprevisto",
            details=details,
        ),
    )


def register_exception_handlers(backend_app: fastapi.FastAPI) -> None:
    backend_app.add_exception_handler(APIError, api_error_handler)  # type: ignore[arg-type]
    backend_app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    backend_app.add_exception_handler(StarletteHTTPException, http_error_handler)  # type: ignore[arg-type]
    backend_app.add_exception_handler(Exception, unhandled_error_handler)
