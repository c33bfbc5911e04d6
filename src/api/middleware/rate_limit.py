import logging

import fastapi
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from src.securities.rate_limiting import FixedWindowRateLimiter, RateLimitDecision
from src.utilities.exceptions.api import RateLimitExceededError, build_error_payload

logger = logging.getLogger(__name__)


def _rate_limit_headers(decision: RateLimitDecision) -> dict[str, str]:
    return {
        "X-RateLimit-Limit": str(decision.limit),
        "X-RateLimit-Remaining": str(decision.remaining),
        "X-RateLimit-Reset": str(decision.reset_seconds),
    }


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, *, limiter: FixedWindowRateLimiter, path_prefix: str = "/"):
        super().__init__(app)
        self.limiter = limiter
        self.path_prefix = path_prefix

    async def dispatch(self, request: fastapi.Request, call_next: RequestResponseEndpoint) -> fastapi.Response:
        if not request.url.path.startswith(self.path_prefix):
            return await call_next(request)

        client = request.client.host if request.client else "unknown"
        decision = self.limiter.consume(key=client)
        if not decision.allowed:
            error = RateLimitExceededError()
            logger.warning("Rate limit exceeded for %s on %s %s", client, request.method, request.url.path)
            return JSONResponse(
                status_code=error.status_code,
                content=build_error_payload(code=error.code, message=error.message),
                headers={**_rate_limit_headers(decision), "Retry-After": str(decision.reset_seconds)},
            )

        response = await call_next(request)
        response.headers.update(_rate_limit_headers(decision))
        return response
