import asyncio
import logging
import time

import fastapi
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from src.utilities.exceptions.api import APIError, PayloadTooLargeError, RequestTimeoutError, build_error_payload

logger = logging.getLogger(__name__)


def _error_response(error: APIError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content=build_error_payload(code=error.code, message=error.message),
    )


class RequestGuardMiddleware(BaseHTTPMiddleware):
    """
    Rejects oversized bodies, bounds request time and writes the access log.
    """

    def __init__(self, app: ASGIApp, *, max_body_bytes: int, timeout_seconds: float):
        super().__init__(app)
        self.max_body_bytes = max_body_bytes
        self.timeout_seconds = timeout_seconds

    def _is_oversized(self, request: fastapi.Request) -> bool:
        content_length = request.headers.get("content-length")
        if content_length is None or not content_length.isdigit():
            return False
        return int(content_length) > self.max_body_bytes

    async def dispatch(self, request: fastapi.Request, call_next: RequestResponseEndpoint) -> fastapi.Response:
        started_at = time.perf_counter()

        if self._is_oversized(request):
            response: fastapi.Response = _error_response(PayloadTooLargeError())
        else:
            try:
                response = await asyncio.wait_for(call_next(request), timeout=self.timeout_seconds)
            except asyncio.TimeoutError:
                response = _error_response(RequestTimeoutError())

        latency_ms = (time.perf_counter() - started_at) * 1000
        logger.info("%s %s %s %.1fms", request.method, request.url.path, response.status_code, latency_ms)
        return response
