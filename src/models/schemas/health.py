from src.config.settings.environment import Environment
from src.models.schemas.base import BaseSchemaModel


class HealthStatus(BaseSchemaModel):
    status: str
    timestamp: str
    uptime: float
    python_version: str
    environment: Environment
    version: str
    records: dict[str, int]
