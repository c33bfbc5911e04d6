import contextlib
import logging
import typing

import fastapi

from src.config.manager import settings
from src.config.settings.environment import Environment
from src.repository.store import InMemoryStore

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOGGING_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    for logger_name in settings.LOGGERS:
        logging.getLogger(logger_name).setLevel(settings.LOGGING_LEVEL)


def execute_backend_server_event_handler(backend_app: fastapi.FastAPI) -> typing.Callable[[], typing.Awaitable[None]]:
    async def launch_backend_server_events() -> None:
        configure_logging()
        api_groups = [tag["name"] for tag in backend_app.openapi_tags or []]
        logger.info("%s %s started (%s)", settings.TITLE, settings.VERSION, Environment(settings.ENVIRONMENT).value)
        logger.info("API mounted at %s: %s", settings.API_PREFIX, ", ".join(api_groups))
        if settings.IS_AUTH_REQUIRED:
            logger.info("Bearer token required on resource endpoints")

    return launch_backend_server_events


def terminate_backend_server_event_handler(backend_app: fastapi.FastAPI) -> typing.Callable[[], typing.Awaitable[None]]:
    async def stop_backend_server_events() -> None:
        store: InMemoryStore = backend_app.state.store
        store.clear_tokens()
        logger.info("%s stopped", settings.TITLE)

    return stop_backend_server_events


@contextlib.asynccontextmanager
async def lifespan(backend_app: fastapi.FastAPI) -> typing.AsyncIterator[None]:
    await execute_backend_server_event_handler(backend_app=backend_app)()
    yield
    await terminate_backend_server_event_handler(backend_app=backend_app)()
