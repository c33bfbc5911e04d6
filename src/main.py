import time

import fastapi
import uvicorn
from dotenv import load_dotenv
from fastapi.middleware.cors import CORSMiddleware

from src.api.endpoints import build_api_router
from src.api.middleware.rate_limit import RateLimitMiddleware
from src.api.middleware.request_guard import RequestGuardMiddleware
from src.api.middleware.security_headers import SecurityHeadersMiddleware
from src.config.events import lifespan
from src.config.manager import settings
from src.repository.store import InMemoryStore
from src.securities.rate_limiting import FixedWindowRateLimiter
from src.utilities.exceptions.handlers import register_exception_handlers


def initialize_backend_application() -> fastapi.FastAPI:
    # Load environment variables from .env if present
    load_dotenv()
    app = fastapi.FastAPI(**settings.set_backend_app_attributes, lifespan=lifespan)  # type: ignore

    # Tags metadata for Swagger grouping
    tags_metadata = [
        {"name": "auth", "description": "Login, token refresh, profile and password management."},
        {"name": "dashboard", "description": "Overview counters, charts and system alerts."},
        {"name": "users", "description": "Back-office users."},
        {"name": "roles", "description": "Roles and their access areas."},
        {"name": "departments", "description": "Company departments."},
        {"name": "candidates", "description": "Candidates and their notes."},
        {"name": "interviews", "description": "Interview scheduling and outcomes."},
        {"name": "notifications", "description": "Per-user notifications, preferences and templates."},
        {"name": "files", "description": "File uploads, downloads and batches."},
        {"name": "datalist", "description": "Lookup lists for the frontend selects."},
        {"name": "health", "description": "Liveness probes."},
    ]
    app.openapi_tags = tags_metadata  # type: ignore[attr-defined]

    # A fresh seeded store per application instance
    app.state.store = InMemoryStore()
    app.state.started_at = time.monotonic()

    # Middleware is applied in reverse order: the request guard sees every request first
    app.add_middleware(SecurityHeadersMiddleware)
    if settings.IS_RATE_LIMIT_ENABLED:
        app.add_middleware(
            RateLimitMiddleware,
            limiter=FixedWindowRateLimiter(
                max_requests=settings.RATE_LIMIT_MAX_REQUESTS,
                window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
            ),
            path_prefix=settings.API_PREFIX,
        )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=settings.IS_ALLOWED_CREDENTIALS,
        allow_methods=settings.ALLOWED_METHODS,
        allow_headers=settings.ALLOWED_HEADERS,
    )
    app.add_middleware(
        RequestGuardMiddleware,
        max_body_bytes=settings.MAX_BODY_SIZE_MB * 1024 * 1024,
        timeout_seconds=settings.REQUEST_TIMEOUT_SECONDS,
    )

    register_exception_handlers(backend_app=app)

    app.include_router(router=build_api_router(), prefix=settings.API_PREFIX)

    return app


backend_app: fastapi.FastAPI = initialize_backend_application()

if __name__ == "__main__":
    uvicorn.run(
        app="src.main:backend_app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.DEBUG,
        workers=settings.SERVER_WORKERS,
        log_level=settings.LOGGING_LEVEL,
    )
