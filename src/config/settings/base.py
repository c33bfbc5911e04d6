import logging
import pathlib

import decouple
import pydantic
from pydantic_settings import BaseSettings

ROOT_DIR: pathlib.Path = pathlib.Path(__file__).parent.parent.parent.parent.resolve()


class BackendBaseSettings(BaseSettings):
    TITLE: str = "Noi Intervistiamo Mock Server"
    VERSION: str = "1.0.0"
    TIMEZONE: str = "Europe/Rome"
    DESCRIPTION: str | None = None
    DEBUG: bool = False
    ENVIRONMENT: str = "DEV"  # Default environment, overridden by subclasses

    SERVER_HOST: str = decouple.config("BACKEND_SERVER_HOST", cast=str, default="127.0.0.1")  # type: ignore
    SERVER_PORT: int = decouple.config("BACKEND_SERVER_PORT", cast=int, default=8080)  # type: ignore
    SERVER_WORKERS: int = decouple.config("BACKEND_SERVER_WORKERS", cast=int, default=1)  # type: ignore
    API_PREFIX: str = "/noi-intervistiamo/api"
    DOCS_URL: str = "/docs"
    OPENAPI_URL: str = "/openapi.json"
    REDOC_URL: str = "/redoc"

    # ------------------------------
    # Mock auth tokens (seconds)
    # ------------------------------
    ACCESS_TOKEN_EXPIRY_SECONDS: int = decouple.config("ACCESS_TOKEN_EXPIRY_SECONDS", cast=int, default=24 * 60 * 60)  # type: ignore
    REMEMBER_ME_TOKEN_EXPIRY_SECONDS: int = decouple.config("REMEMBER_ME_TOKEN_EXPIRY_SECONDS", cast=int, default=7 * 24 * 60 * 60)  # type: ignore
    REFRESH_TOKEN_EXPIRY_SECONDS: int = decouple.config("REFRESH_TOKEN_EXPIRY_SECONDS", cast=int, default=30 * 24 * 60 * 60)  # type: ignore
    RESET_TOKEN_EXPIRY_SECONDS: int = decouple.config("RESET_TOKEN_EXPIRY_SECONDS", cast=int, default=60 * 60)  # type: ignore
    IS_AUTH_REQUIRED: bool = decouple.config("IS_AUTH_REQUIRED", cast=bool, default=False)  # type: ignore

    IS_ALLOWED_CREDENTIALS: bool = decouple.config("IS_ALLOWED_CREDENTIALS", cast=bool, default=True)  # type: ignore
    ALLOWED_ORIGINS: list[str] = [
        "http://localhost:4200",  # Angular dev server
        "http://127.0.0.1:4200",
    ]
    ALLOWED_METHODS: list[str] = ["*"]
    ALLOWED_HEADERS: list[str] = ["*"]

    LOGGING_LEVEL: int = logging.INFO
    LOGGERS: tuple[str, str] = ("uvicorn.asgi", "uvicorn.access")

    # ------------------------------
    # Request guards
    # ------------------------------
    IS_RATE_LIMIT_ENABLED: bool = decouple.config("IS_RATE_LIMIT_ENABLED", cast=bool, default=True)  # type: ignore
    RATE_LIMIT_MAX_REQUESTS: int = decouple.config("RATE_LIMIT_MAX_REQUESTS", cast=int, default=1000)  # type: ignore
    RATE_LIMIT_WINDOW_SECONDS: int = decouple.config("RATE_LIMIT_WINDOW_SECONDS", cast=int, default=15 * 60)  # type: ignore
    REQUEST_TIMEOUT_SECONDS: float = decouple.config("REQUEST_TIMEOUT_SECONDS", cast=float, default=30.0)  # type: ignore
    MAX_BODY_SIZE_MB: int = decouple.config("MAX_BODY_SIZE_MB", cast=int, default=10)  # type: ignore

    # ------------------------------
    # File uploads (kept in memory)
    # ------------------------------
    MAX_UPLOAD_SIZE_MB: int = decouple.config("MAX_UPLOAD_SIZE_MB", cast=int, default=10)  # type: ignore
    MAX_UPLOAD_FILES: int = decouple.config("MAX_UPLOAD_FILES", cast=int, default=5)  # type: ignore
    STORAGE_LIMIT_BYTES: int = 1024 * 1024 * 1024

    model_config = pydantic.ConfigDict(
        case_sensitive=True,
        env_file=f"{str(ROOT_DIR)}/.env",
        validate_assignment=True,
        extra='allow'
    )

    @property
    def set_backend_app_attributes(self) -> dict[str, str | bool | None]:
        """
        Set all `FastAPI` class' attributes with the custom values defined in `BackendBaseSettings`.
        """
        return {
            "title": self.TITLE,
            "version": self.VERSION,
            "description": self.DESCRIPTION,
            "docs_url": self.DOCS_URL,
            "openapi_url": self.OPENAPI_URL,
            "redoc_url": self.REDOC_URL,
        }
