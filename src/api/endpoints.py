import platform
import time

import fastapi
from fastapi.responses import PlainTextResponse

from src.api.dependencies.auth import get_current_token
from src.api.dependencies.repository import get_store
from src.api.routes.auth import router as auth_router
from src.api.routes.candidates import router as candidates_router
from src.api.routes.dashboard import router as dashboard_router
from src.api.routes.datalist import router as datalist_router
from src.api.routes.departments import router as departments_router
from src.api.routes.files import router as files_router
from src.api.routes.interviews import router as interviews_router
from src.api.routes.notifications import router as notifications_router
from src.api.routes.roles import router as roles_router
from src.api.routes.users import router as users_router
from src.config.manager import settings
from src.models.schemas.health import HealthStatus
from src.repository.store import InMemoryStore
from src.utilities.formatters.datetime_formatter import format_datetime_into_isoformat, utc_now

RESOURCE_ROUTERS: tuple[fastapi.APIRouter, ...] = (
    users_router,
    roles_router,
    departments_router,
    candidates_router,
    interviews_router,
    notifications_router,
    files_router,
)


def build_api_router() -> fastapi.APIRouter:
    """
    Assemble every API group under one router.

    Built per application so ``IS_AUTH_REQUIRED`` is read when the app is created.
    """
    router = fastapi.APIRouter()

    @router.get(path="/health", name="health:read-health", response_model=HealthStatus, tags=["health"])
    async def health_check(request: fastapi.Request, store: InMemoryStore = fastapi.Depends(get_store)) -> HealthStatus:
        return HealthStatus(
            status="OK",
            timestamp=format_datetime_into_isoformat(utc_now()),
            uptime=round(time.monotonic() - request.app.state.started_at, 3),
            python_version=platform.python_version(),
            environment=settings.ENVIRONMENT,
            version=settings.VERSION,
            records=store.counts(),
        )

    @router.get(path="/ping", name="health:ping", response_class=PlainTextResponse, tags=["health"])
    async def ping() -> str:
        return "pong"

    resource_dependencies = [fastapi.Depends(get_current_token)] if settings.IS_AUTH_REQUIRED else []

    router.include_router(router=auth_router)
    router.include_router(router=dashboard_router, dependencies=resource_dependencies)
    for resource_router in RESOURCE_ROUTERS:
        router.include_router(router=resource_router, dependencies=resource_dependencies)
    router.include_router(router=datalist_router, dependencies=resource_dependencies)

    return router
